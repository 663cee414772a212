"""Game session: current board, score, undo history and game-over state."""

import logging

from numpy import argwhere, integer, issubdtype, ndarray
from numpy.random import Generator, default_rng

from slidemerge.core.gameboard import BOARD_SIZE, copy_board, create_board, has_any_move, invalid_tiles, max_tile
from slidemerge.core.gamemove import slide_board
from slidemerge.core.spawn import spawn_tile
from slidemerge.core.types import Direction, HistoryEntry, MoveOutcome
from slidemerge.utils.storage import BestScoreStore, MemoryBestScore

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameSession:
    """
    A single game of the sliding-tile merge puzzle.

    The session owns its board, score and history. It starts in the playing state with an empty board
    and a score of 0; call ``new_game`` to place the two starting tiles.

    Calls must be serialized: the history stack is not safe under concurrent access.
    """

    def __init__(self, store: BestScoreStore | None = None, seed: int | None = None):
        """
        Initialize the session.

        Parameters
        ----------
        store : BestScoreStore, optional
            Where the best score is loaded from and saved to (default keeps it in memory).
        seed : int, optional
            Seed of the random generator used to spawn tiles.
        """
        self._store = store if store is not None else MemoryBestScore()
        self._rng: Generator = default_rng(seed)

        self._board: ndarray = create_board(BOARD_SIZE)
        self._score = 0
        self._history: list[HistoryEntry] = []
        self._game_over = False

        self._best_score = self._store.load()

    @classmethod
    def from_board(
        cls,
        board: ndarray,
        score: int = 0,
        store: BestScoreStore | None = None,
        seed: int | None = None,
    ) -> "GameSession":
        """
        Build a session around an existing board.

        Parameters
        ----------
        board : ndarray
            A 4x4 board. It is copied.
        score : int, optional
            Score reached so far (default is 0).
        store : BestScoreStore, optional
            Best-score store.
        seed : int, optional
            Seed of the random generator.

        Returns
        -------
        GameSession
            A session whose game-over flag reflects the given board.

        Raises
        ------
        ValueError
            If the board is not 4x4 integers, holds a tile that is neither 0 nor a power of two >= 2, or
            the score is negative.
        """
        if board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {board.shape}")
        if not issubdtype(board.dtype, integer):
            raise ValueError(f"board must hold integers, got dtype {board.dtype}")
        invalid = argwhere(invalid_tiles(board))
        if len(invalid):
            row, col = invalid[0]
            raise ValueError(f"invalid tile {board[row, col]} at ({row}, {col}): tiles are 0 or powers of two >= 2")
        if score < 0:
            raise ValueError(f"score must be >= 0, got {score}")

        session = cls(store=store, seed=seed)
        session._board = create_board(BOARD_SIZE)
        session._board[:] = board
        session._score = int(score)
        session._game_over = not has_any_move(session._board)
        session._record_best()
        return session

    @property
    def board(self) -> ndarray:
        """Read-only view of the current board."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> int:
        """
        Get the current score.

        Returns
        -------
        int
            Sum of every merge of the game so far.
        """
        return self._score

    @property
    def best_score(self) -> int:
        """
        Get the best score known to the session.

        Returns
        -------
        int
            The highest of the stored best score and the scores reached since the session was built.
        """
        return self._best_score

    @property
    def is_game_over(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no move can change the board, False otherwise.
        """
        return self._game_over

    @property
    def history_depth(self) -> int:
        """Number of moves that can be undone."""
        return len(self._history)

    def new_game(self, seed: int | None = None) -> None:
        """
        Start a new game: empty board, score 0, no history, two random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before placing the starting tiles.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = create_board(BOARD_SIZE)
        self._score = 0
        self._history.clear()
        self._game_over = False

        # ##: Two tiles guarantee a playable start.
        spawn_tile(self._board, self._rng)
        spawn_tile(self._board, self._rng)
        _logger.debug("New game started")

    def move(self, direction: Direction | str) -> MoveOutcome:
        """
        Play a move.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move.

        Returns
        -------
        MoveOutcome
            What happened. If the board did not change (or the game is already over) the session is
            left exactly as it was.

        Raises
        ------
        ValueError
            If ``direction`` is not a valid direction.
        """
        direction = Direction(direction)
        if self._game_over:
            return MoveOutcome(board_changed=False, score_delta=0, events=(), terminal=True)

        # ##: Snapshot before the attempt, dropped if nothing moves.
        self._history.append(HistoryEntry(board=copy_board(self._board), score=self._score))
        result = slide_board(self._board, direction)
        if not result.board_changed:
            self._history.pop()
            return MoveOutcome(board_changed=False, score_delta=0, events=(), terminal=False)

        self._score += result.score_delta
        self._record_best()

        events = list(result.events)
        spawned = spawn_tile(self._board, self._rng)
        if spawned is not None:
            events.append(spawned)

        self._game_over = not has_any_move(self._board)
        _logger.debug("Move %s: +%d (score %d)", direction.value, result.score_delta, self._score)
        if self._game_over:
            _logger.info("Game over: score %d, max tile %d", self._score, max_tile(self._board))

        return MoveOutcome(
            board_changed=True,
            score_delta=result.score_delta,
            events=tuple(events),
            terminal=self._game_over,
        )

    def undo(self) -> bool:
        """
        Restore the board and score from before the last move.

        Returns
        -------
        bool
            True if a move was undone, False if there was nothing to undo.

        Notes
        -----
        Undo always brings the session back to the playing state.
        """
        if not self._history:
            return False

        entry = self._history.pop()
        self._board = copy_board(entry.board)
        self._score = entry.score
        self._game_over = False
        _logger.debug("Undo: score back to %d", self._score)
        return True

    def _record_best(self) -> None:
        """Save the score as the new best if it beats the previous one."""
        if self._score > self._best_score:
            self._best_score = self._score
            self._store.save(self._score)
            _logger.info("New best score: %d", self._score)
