"""
Collapse a single row or column: compaction, pairwise merge and padding.
"""

from numpy import ndarray, zeros_like

from slidemerge.core.types import ChangeEvent, Direction, EventKind, LineResult, Position


def _event_position(output_index: int, line_index: int, size: int, direction: Direction) -> Position:
    """
    Map an index of the resolved line back to board coordinates.

    Parameters
    ----------
    output_index : int
        Index in the resolved line, counted from the end tiles travel towards.
    line_index : int
        Row index for horizontal moves, column index for vertical ones.
    size : int
        Length of the line.
    direction : Direction
        Direction of the move.

    Returns
    -------
    Position
        Coordinates of the cell in the original, unreversed board frame.
    """
    along = size - 1 - output_index if direction.is_reversed else output_index
    if direction.is_horizontal:
        return Position(line_index, along)
    return Position(along, line_index)


def resolve_line(line: ndarray, line_index: int, direction: Direction) -> LineResult:
    """
    Slide a line towards index 0 and merge equal neighbours.

    Parameters
    ----------
    line : ndarray
        One row or column, already oriented so that tiles travel towards index 0. Callers reverse the
        line for right and down moves.
    line_index : int
        Index of the row (left/right) or column (up/down) on the board. Only used for event positions.
    direction : Direction
        Direction of the move. Only used for event positions.

    Returns
    -------
    LineResult
        The resolved line (same length as ``line``, zero padded at the end), the score earned and one
        merge event per merge.

    Notes
    -----
    - Zeros are removed before merging, so equal tiles separated by empty cells still merge.
    - Pairs are matched from the start of the line; a merged tile never merges again in the same move,
      so ``[2, 2, 2, 0]`` becomes ``[4, 2, 0, 0]``.
    - The score is the sum of the merged values.

    Examples
    --------
    >>> resolve_line(np.array([2, 0, 0, 2]), 0, Direction.LEFT).values
    array([4, 0, 0, 0])
    """
    size = len(line)
    non_zero = line[line != 0]
    result = zeros_like(line)
    events = []
    score = 0

    # ##: Merge pairs from the start of the compacted line.
    i, out = 0, 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result[out] = merged
            score += merged
            events.append(ChangeEvent(EventKind.MERGE, _event_position(out, line_index, size, direction)))
            i += 2
        else:
            result[out] = non_zero[i]
            i += 1
        out += 1

    return LineResult(values=result, score=score, events=tuple(events))
