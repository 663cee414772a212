# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle on a 4x4 board.
"""

from .config import GameConfig
from .core import Direction, EventKind, MoveOutcome
from .envs import GameSession

__all__ = ["Direction", "EventKind", "GameConfig", "GameSession", "MoveOutcome"]
