# -*- coding: utf-8 -*-
"""
Host-side helpers: best-score persistence and input translation.

The matplotlib window lives in `slidemerge.utils.windows` and is imported explicitly by hosts that need it.
"""

from .storage import BestScoreStore, FileBestScore, MemoryBestScore
from .swipe import KEY_BINDINGS, SWIPE_THRESHOLD, swipe_direction

__all__ = ["BestScoreStore", "FileBestScore", "MemoryBestScore", "KEY_BINDINGS", "SWIPE_THRESHOLD", "swipe_direction"]
