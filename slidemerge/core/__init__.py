# -*- coding: utf-8 -*-
"""
Pure game engine for the sliding-tile merge puzzle.

It includes the board model, the line resolver that slides and merges one row or column, the move
orchestrator that applies it to the whole board, and the tile spawner.
"""

from .gameboard import (
    BOARD_SIZE,
    boards_equal,
    copy_board,
    create_board,
    empty_cells,
    has_any_move,
    invalid_tiles,
    is_done,
    max_tile,
)
from .gameline import resolve_line
from .gamemove import legal_directions, legal_directions_mask, slide_board
from .spawn import TILE_SPAWN_PROBS, spawn_tile
from .types import ChangeEvent, Direction, EventKind, HistoryEntry, LineResult, MoveOutcome, Position, SlideResult

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "ChangeEvent",
    "Direction",
    "EventKind",
    "HistoryEntry",
    "LineResult",
    "MoveOutcome",
    "Position",
    "SlideResult",
    "boards_equal",
    "copy_board",
    "create_board",
    "empty_cells",
    "has_any_move",
    "invalid_tiles",
    "is_done",
    "legal_directions",
    "legal_directions_mask",
    "max_tile",
    "resolve_line",
    "slide_board",
    "spawn_tile",
]
