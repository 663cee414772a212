"""
Board model for the sliding-tile merge puzzle: creation, copies and the terminal-state oracle.
"""

from typing import Iterator

from numpy import any as np_any
from numpy import argwhere, array_equal, int64, ndarray, zeros

from slidemerge.core.types import Position

# ##>: Side length of the board. Other sizes are not supported.
BOARD_SIZE = 4


def create_board(size: int = BOARD_SIZE) -> ndarray:
    """
    Create an empty board.

    Parameters
    ----------
    size : int, optional
        Side length of the square board (default is 4).

    Returns
    -------
    ndarray
        A ``size`` x ``size`` int64 array filled with zeros.
    """
    return zeros((size, size), dtype=int64)


def copy_board(board: ndarray) -> ndarray:
    """
    Deep copy a board. The result shares no memory with the source.
    """
    return board.copy()


def boards_equal(first: ndarray, second: ndarray) -> bool:
    """
    Structural equality of two boards of the same dimensions.
    """
    return bool(array_equal(first, second))


def empty_cells(board: ndarray) -> Iterator[Position]:
    """
    Lazily yield the positions of empty cells, in row-major order.

    Parameters
    ----------
    board : ndarray
        The game board.

    Yields
    ------
    Position
        Coordinates of a cell whose value is 0.

    Notes
    -----
    The board is scanned when iteration starts, so every call reflects the board as it is at that moment.
    """
    for row, col in argwhere(board == 0):
        yield Position(int(row), int(col))


def has_any_move(board: ndarray) -> bool:
    """
    Check whether at least one move can still change the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if there is an empty cell, or two equal neighbours in a row or in a column.

    Notes
    -----
    The whole board is scanned on every call; nothing is cached.
    """
    if np_any(board == 0):
        return True
    if np_any(board[:, :-1] == board[:, 1:]):
        return True
    return bool(np_any(board[:-1] == board[1:]))


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended: the board is full and no two neighbours are equal.
    """
    return not has_any_move(board)


def invalid_tiles(board: ndarray) -> ndarray:
    """
    Mask of the cells holding a value that cannot appear in a game.

    Parameters
    ----------
    board : ndarray
        The game board, with an integer dtype.

    Returns
    -------
    ndarray
        Boolean array, True where the cell is neither 0 nor a power of two greater than or equal to 2.
    """
    non_zero = board != 0
    not_power_of_two = (board & (board - 1)) != 0
    return (board < 0) | (non_zero & ((board < 2) | not_power_of_two))


def max_tile(board: ndarray) -> int:
    """Highest tile on the board, 0 for an empty board."""
    return int(board.max(initial=0))
