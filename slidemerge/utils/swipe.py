"""Translate host input (keys, swipes) into move directions."""

from slidemerge.core.types import Direction

# ##: Default minimum drag distance, in pixels.
SWIPE_THRESHOLD = 30.0

# ##: Keyboard bindings, using matplotlib key names.
KEY_BINDINGS: dict[str, Direction] = {
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
}


def swipe_direction(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD, touch_count: int = 1) -> Direction | None:
    """
    Turn a swipe vector into a direction.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive towards the right.
    dy : float
        Vertical displacement in screen coordinates, positive downwards.
    threshold : float, optional
        Minimum displacement along at least one axis (default is 30 pixels).
    touch_count : int, optional
        Number of simultaneous touches. Multi-touch gestures are ignored.

    Returns
    -------
    Direction or None
        The direction of the dominant axis, or None if the gesture is too short or multi-touch.

    Notes
    -----
    When both axes have the same magnitude the swipe is read as vertical.
    """
    if touch_count > 1:
        return None

    abs_x, abs_y = abs(dx), abs(dy)
    if abs_x < threshold and abs_y < threshold:
        return None

    if abs_x > abs_y:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
