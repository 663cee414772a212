# -*- coding: utf-8 -*-
"""
Best-score stores: the only state that outlives a game.
"""
import json
import logging
from pathlib import Path
from typing import Protocol

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##: Key of the best score in the JSON document.
BEST_SCORE_KEY = "best_score"


class BestScoreStore(Protocol):
    """Persistence collaborator for the best score."""

    def load(self) -> int:
        """Return the stored best score, 0 when nothing was stored yet."""

    def save(self, score: int) -> None:
        """Store a new best score. Lower or equal values are ignored."""


class MemoryBestScore:
    """Best score kept in memory, lost when the process exits."""

    def __init__(self, initial: int = 0):
        self._best = max(0, int(initial))

    def load(self) -> int:
        return self._best

    def save(self, score: int) -> None:
        self._best = max(self._best, int(score))


class FileBestScore:
    """
    Best score persisted in a small JSON file.

    Parameters
    ----------
    path : Path or str
        Location of the JSON file. Parent directories are created on the first save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._best: int | None = None

    def load(self) -> int:
        """
        Read the best score from disk.

        Returns
        -------
        int
            The stored value, or 0 when the file is missing or unreadable.
        """
        if not self.path.exists():
            self._best = 0
            return self._best

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            self._best = max(0, int(document[BEST_SCORE_KEY]))
        except (OSError, ValueError, TypeError, KeyError):
            _logger.warning("Unreadable best score file %s, starting from 0", self.path, exc_info=True)
            self._best = 0
        return self._best

    def save(self, score: int) -> None:
        """
        Write the best score to disk if it beats the current one.

        Parameters
        ----------
        score : int
            Candidate best score.
        """
        current = self._best if self._best is not None else self.load()
        if score <= current:
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({BEST_SCORE_KEY: int(score)}), encoding="utf-8")
        self._best = int(score)
        _logger.debug("Best score %d written to %s", score, self.path)
