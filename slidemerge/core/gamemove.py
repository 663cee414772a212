"""
Apply a move to the whole board, and determine which directions are legal.
"""

from numpy import array_equal, ndarray

from slidemerge.core.gameline import resolve_line
from slidemerge.core.types import Direction, SlideResult


def _line_view(board: ndarray, index: int, direction: Direction) -> ndarray:
    """Writable view on the row or column ``index``, in board order."""
    return board[index, :] if direction.is_horizontal else board[:, index]


def slide_board(board: ndarray, direction: Direction | str) -> SlideResult:
    """
    Slide and merge every line of the board in the given direction.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place**, line by line.
    direction : Direction or str
        Direction of the move. Strings must be one of the enumeration values.

    Returns
    -------
    SlideResult
        Whether the board changed, the score earned and the merge events of all lines.

    Raises
    ------
    ValueError
        If ``direction`` is not a valid direction.

    Notes
    -----
    - Rows are processed for left/right moves, columns for up/down moves.
    - For right/down moves each line is reversed before resolution and the result reversed back.
    - Only lines whose content changed are written back, so a move that changes nothing leaves the
      board untouched.
    - No tile is spawned here.
    """
    direction = Direction(direction)
    changed = False
    score = 0
    events = []

    for index in range(board.shape[0]):
        line = _line_view(board, index, direction)
        oriented = line[::-1] if direction.is_reversed else line
        resolved = resolve_line(oriented.copy(), index, direction)

        values = resolved.values[::-1] if direction.is_reversed else resolved.values
        if not array_equal(line, values):
            line[:] = values
            changed = True

        score += resolved.score
        events.extend(resolved.events)

    return SlideResult(board_changed=changed, score_delta=score, events=tuple(events))


def _axis_moves(front: ndarray, back: ndarray) -> tuple[bool, bool]:
    """
    Whether tiles can move towards ``front`` and towards ``back``.

    ``front`` and ``back`` hold every pair of neighbours along one axis, ``front`` being the cell with the
    lower index.
    """
    pairs = (front != 0) & (front == back)
    towards_front = bool(pairs.any() or ((front == 0) & (back != 0)).any())
    towards_back = bool(pairs.any() or ((back == 0) & (front != 0)).any())
    return towards_front, towards_back


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Tell which of the four directions would change the board, without moving anything.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down), in ``Direction`` order.

    Notes
    -----
    A direction is legal when some tile has an empty cell on its travel side, or two equal tiles are
    neighbours along the axis of the move.
    """
    left, right = _axis_moves(board[:, :-1], board[:, 1:])
    up, down = _axis_moves(board[:-1, :], board[1:, :])
    return left, up, right, down


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Directions that would change the board, in enumeration order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction, legal in zip(Direction, mask) if legal]
