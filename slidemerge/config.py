# -*- coding: utf-8 -*-
"""
Host configuration.
"""
from dataclasses import dataclass, field
from pathlib import Path

from slidemerge.core.gameboard import BOARD_SIZE
from slidemerge.utils.swipe import SWIPE_THRESHOLD

THEMES = ("light", "dark")


@dataclass
class GameConfig:
    """Settings of an interactive game."""

    board_size: int = BOARD_SIZE  # Only 4x4 boards are supported
    swipe_threshold: float = SWIPE_THRESHOLD  # Minimum drag distance in pixels
    best_score_path: Path = field(default_factory=lambda: Path.home() / ".slidemerge" / "best_score.json")
    seed: int | None = None
    theme: str = "light"

    def __post_init__(self):
        if self.board_size != BOARD_SIZE:
            raise ValueError(f"board_size must be {BOARD_SIZE}, got {self.board_size}")
        if self.swipe_threshold <= 0:
            raise ValueError(f"swipe_threshold must be > 0, got {self.swipe_threshold}")
        if self.theme not in THEMES:
            raise ValueError(f"theme must be one of {THEMES}, got {self.theme!r}")
        self.best_score_path = Path(self.best_score_path)
