"""
Spawn new tiles in random empty cells.
"""

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from slidemerge.core.gameboard import empty_cells
from slidemerge.core.types import ChangeEvent, EventKind

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator, used when the caller does not provide one.
_GENERATOR = default_rng(PCG64DXSM())


def spawn_tile(board: ndarray, rng: Generator | None = None) -> ChangeEvent | None:
    """
    Put a new tile (2 or 4) in a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. **Modified in-place.**
    rng : Generator, optional
        Random generator to draw from. Defaults to a module-level generator.

    Returns
    -------
    ChangeEvent or None
        A new-tile event at the chosen cell, or None if the board was already full.

    Notes
    -----
    - The value is 2 with probability 0.9 and 4 with probability 0.1.
    - A full board is left untouched; this is not an error.
    """
    rng = rng if rng is not None else _GENERATOR

    # ##: Only if there are still available places.
    available_cells = list(empty_cells(board))
    if not available_cells:
        return None

    position = available_cells[int(rng.integers(len(available_cells)))]
    board[position.row, position.col] = int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))
    return ChangeEvent(EventKind.NEW_TILE, position)
