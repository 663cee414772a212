# -*- coding: utf-8 -*-
"""
Stateful game session built on the pure engine.

This module provides the `GameSession` class, which holds the board, score and undo history of one game.
"""

from .session import GameSession

__all__ = ["GameSession"]
