# -*- coding: utf-8 -*-
"""
Set of types shared by the game engine and its hosts.
"""
from enum import Enum
from typing import NamedTuple

from numpy import ndarray


class Direction(str, Enum):
    """
    Direction of a move.

    The declaration order matches the usual action indices (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def is_horizontal(self) -> bool:
        """True when the move processes rows instead of columns."""
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_reversed(self) -> bool:
        """True when tiles travel towards the last index of each line."""
        return self in (Direction.RIGHT, Direction.DOWN)


class EventKind(str, Enum):
    """Kind of change produced during a move."""

    NEW_TILE = 'new-tile'
    MERGE = 'merge'


class Position(NamedTuple):
    """Cell coordinates, 0-indexed."""

    row: int
    col: int


class ChangeEvent(NamedTuple):
    """
    A rendering hint emitted by a move.

    Events carry no state the engine depends on; hosts use them for animations and sounds.
    """

    kind: EventKind
    position: Position


class LineResult(NamedTuple):
    """Outcome of collapsing a single line."""

    values: ndarray
    score: int
    events: tuple[ChangeEvent, ...]


class SlideResult(NamedTuple):
    """Outcome of sliding the whole board, before any tile is spawned."""

    board_changed: bool
    score_delta: int
    events: tuple[ChangeEvent, ...]


class MoveOutcome(NamedTuple):
    """
    Outcome of a session move.

    Attributes
    ----------
    board_changed : bool
        Whether the move altered the board. When False nothing else happened.
    score_delta : int
        Sum of the values produced by every merge of the move.
    events : tuple[ChangeEvent, ...]
        Merge events in line order, followed by the new-tile event if one was spawned.
    terminal : bool
        Whether the game is over after the move.
    """

    board_changed: bool
    score_delta: int
    events: tuple[ChangeEvent, ...]
    terminal: bool


class HistoryEntry(NamedTuple):
    """Snapshot taken before a move, restored by undo."""

    board: ndarray
    score: int
