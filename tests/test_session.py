"""
Tests for the game session state machine.
"""

from unittest import TestCase, main

import numpy as np

from slidemerge.core.gamemove import legal_directions
from slidemerge.core.types import Direction, EventKind, Position
from slidemerge.envs import GameSession
from slidemerge.utils.storage import MemoryBestScore

TERMINAL_BOARD = np.array(
    [[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]]
)


class TestSessionLifecycle(TestCase):
    """Construction and new games."""

    def test_initial_state(self):
        """A fresh session is playing, empty and at 0."""
        session = GameSession(seed=0)

        self.assertEqual(np.count_nonzero(session.board), 0)
        self.assertEqual(session.score, 0)
        self.assertFalse(session.is_game_over)
        self.assertEqual(session.history_depth, 0)

    def test_new_game(self):
        """New game places exactly two tiles worth 2 or 4."""
        session = GameSession()
        for seed in range(50):
            session.new_game(seed=seed)
            tiles = session.board[session.board != 0]

            self.assertEqual(len(tiles), 2)
            self.assertTrue(np.all((tiles == 2) | (tiles == 4)))
            self.assertFalse(session.is_game_over)
            self.assertEqual(session.score, 0)

    def test_new_game_seed_reproducibility(self):
        """Same seed produces identical starting boards."""
        first, second = GameSession(seed=5), GameSession(seed=5)
        first.new_game()
        second.new_game()
        np.testing.assert_array_equal(first.board, second.board)

    def test_new_game_clears_history_and_game_over(self):
        """New game resets everything, even after the game ended."""
        session = GameSession.from_board(TERMINAL_BOARD, score=100)
        self.assertTrue(session.is_game_over)

        session.new_game(seed=1)
        self.assertFalse(session.is_game_over)
        self.assertEqual(session.score, 0)
        self.assertEqual(session.history_depth, 0)
        self.assertFalse(session.undo())

    def test_board_is_read_only(self):
        """Hosts cannot write through the board view."""
        session = GameSession(seed=0)
        session.new_game()
        with self.assertRaises(ValueError):
            session.board[0, 0] = 1024

    def test_from_board_rejects_wrong_shape(self):
        """Only 4x4 boards are accepted."""
        with self.assertRaises(ValueError):
            GameSession.from_board(np.zeros((3, 3), dtype=np.int64))
        with self.assertRaises(ValueError):
            GameSession.from_board(np.zeros((4, 4), dtype=np.int64), score=-1)

    def test_from_board_rejects_invalid_tiles(self):
        """Tiles must be 0 or powers of two from 2 upwards."""
        for bad in (3, -2, 1, 6, 96):
            board = np.zeros((4, 4), dtype=np.int64)
            board[0, 0] = 2
            board[2, 1] = bad
            with self.assertRaises(ValueError, msg=str(bad)):
                GameSession.from_board(board)

        with self.assertRaises(ValueError):
            GameSession.from_board(np.full((4, 4), 2.0))

        # ##>: Valid powers of two, large ones included, are accepted.
        session = GameSession.from_board(np.array([[2, 4, 0, 0], [65536, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 1024]]))
        self.assertEqual(session.board[1, 0], 65536)

    def test_from_board_copies(self):
        """The session does not alias the given board."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        session = GameSession.from_board(board, seed=0)
        session.move(Direction.LEFT)
        np.testing.assert_array_equal(board[0], [2, 2, 0, 0])


class TestSessionInterface(TestCase):
    """Surface exposed to hosts."""

    def test_public_members(self):
        """Hosts see the game operations and documented read-only state, nothing else."""
        public = {name for name in dir(GameSession) if not name.startswith('_')}
        expected = {
            'board',
            'best_score',
            'from_board',
            'history_depth',
            'is_game_over',
            'move',
            'new_game',
            'score',
            'undo',
        }
        self.assertEqual(public, expected)

    def test_properties_documented(self):
        """Every property carries a docstring."""
        for name in ('board', 'score', 'best_score', 'is_game_over', 'history_depth'):
            prop = getattr(GameSession, name)
            self.assertIsInstance(prop, property)
            self.assertTrue(prop.__doc__ and prop.__doc__.strip(), msg=name)


class TestSessionMove(TestCase):
    """Moves, spawns and the game-over transition."""

    def test_merge_scenario(self):
        """Left on [2, 2, 0, 0] scores 4, reports the merge, then one spawn."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        session = GameSession.from_board(board, seed=0)
        outcome = session.move(Direction.LEFT)

        self.assertTrue(outcome.board_changed)
        self.assertEqual(outcome.score_delta, 4)
        self.assertFalse(outcome.terminal)
        self.assertEqual(session.score, 4)
        self.assertEqual(session.board[0, 0], 4)
        self.assertEqual(session.history_depth, 1)

        # ##>: Merge first, then the spawned tile.
        self.assertEqual([event.kind for event in outcome.events], [EventKind.MERGE, EventKind.NEW_TILE])
        self.assertEqual(outcome.events[0].position, Position(0, 0))
        spawned = outcome.events[1].position
        self.assertIn(session.board[spawned.row, spawned.col], (2, 4))
        self.assertEqual(np.count_nonzero(session.board), 2)

    def test_blocked_move_is_noop(self):
        """A move that changes nothing spawns nothing and keeps the history."""
        board = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        session = GameSession.from_board(board, score=12, seed=0)
        outcome = session.move(Direction.LEFT)

        self.assertFalse(outcome.board_changed)
        self.assertEqual(outcome.score_delta, 0)
        self.assertEqual(outcome.events, ())
        self.assertEqual(session.score, 12)
        self.assertEqual(session.history_depth, 0)
        np.testing.assert_array_equal(session.board, board)

    def test_terminal_board_scenario(self):
        """On a terminal board every direction is a no-op and the flag is already set."""
        session = GameSession.from_board(TERMINAL_BOARD, seed=0)
        self.assertTrue(session.is_game_over)

        for direction in Direction:
            outcome = session.move(direction)
            self.assertFalse(outcome.board_changed)
            self.assertTrue(outcome.terminal)
            self.assertEqual(session.history_depth, 0)
            np.testing.assert_array_equal(session.board, TERMINAL_BOARD)

    def test_move_reaches_game_over(self):
        """The last spawn can end the game."""
        # ##>: Left merges the two 2s; the freed cell is the only empty one and receives 2 or 4.
        board = np.array([[2, 2, 8, 16], [64, 128, 256, 512], [8, 16, 32, 64], [128, 256, 512, 1024]])
        session = GameSession.from_board(board, seed=0)
        outcome = session.move(Direction.LEFT)

        np.testing.assert_array_equal(session.board[0, :3], [4, 8, 16])
        self.assertIn(session.board[0, 3], (2, 4))
        self.assertTrue(outcome.terminal)
        self.assertTrue(session.is_game_over)

        # ##>: Further moves are ignored.
        frozen = session.board.copy()
        self.assertFalse(session.move(Direction.RIGHT).board_changed)
        np.testing.assert_array_equal(session.board, frozen)

    def test_invalid_direction(self):
        """Unknown directions fail fast."""
        session = GameSession(seed=0)
        session.new_game()
        with self.assertRaises(ValueError):
            session.move('sideways')

    def test_score_never_decreases(self):
        """Score is monotonic over a whole game."""
        policy = np.random.default_rng(11)
        session = GameSession(seed=11)
        session.new_game()

        previous = 0
        while not session.is_game_over:
            directions = legal_directions(session.board)
            outcome = session.move(directions[int(policy.integers(len(directions)))])
            self.assertTrue(outcome.board_changed)
            self.assertEqual(session.score, previous + outcome.score_delta)
            self.assertGreaterEqual(session.score, previous)
            previous = session.score

        self.assertTrue(outcome.terminal)


class TestSessionUndo(TestCase):
    """Undo history."""

    def test_undo_on_empty_history(self):
        """Nothing to undo is not an error."""
        session = GameSession(seed=0)
        session.new_game()
        self.assertFalse(session.undo())

    def test_undo_restores_every_depth(self):
        """Undoing moves one by one walks back through every snapshot."""
        policy = np.random.default_rng(3)
        session = GameSession(seed=3)
        session.new_game()

        snapshots = []
        for _ in range(30):
            if session.is_game_over:
                break
            snapshots.append((session.board.copy(), session.score))
            directions = legal_directions(session.board)
            session.move(directions[int(policy.integers(len(directions)))])

        self.assertEqual(session.history_depth, len(snapshots))
        for board, score in reversed(snapshots):
            self.assertTrue(session.undo())
            np.testing.assert_array_equal(session.board, board)
            self.assertEqual(session.score, score)

        self.assertFalse(session.undo())

    def test_undo_revives_finished_game(self):
        """Undoing the move that ended the game returns to playing."""
        board = np.array([[2, 2, 8, 16], [64, 128, 256, 512], [8, 16, 32, 64], [128, 256, 512, 1024]])
        session = GameSession.from_board(board, score=40, seed=0)
        session.move(Direction.LEFT)
        self.assertTrue(session.is_game_over)

        self.assertTrue(session.undo())
        self.assertFalse(session.is_game_over)
        self.assertEqual(session.score, 40)
        np.testing.assert_array_equal(session.board, board)


class TestSessionBestScore(TestCase):
    """Best-score collaborator."""

    def test_best_score_loaded(self):
        """The stored value is read at construction."""
        session = GameSession(store=MemoryBestScore(500))
        self.assertEqual(session.best_score, 500)

    def test_best_score_saved_when_exceeded(self):
        """The store receives the score once it beats the best."""
        store = MemoryBestScore(2)
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        session = GameSession.from_board(board, store=store, seed=0)
        session.move(Direction.LEFT)

        self.assertEqual(session.best_score, 4)
        self.assertEqual(store.load(), 4)

    def test_best_score_not_lowered(self):
        """A lower score never touches the best."""
        store = MemoryBestScore(1000)
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        session = GameSession.from_board(board, store=store, seed=0)
        session.move(Direction.LEFT)
        session.new_game()

        self.assertEqual(session.best_score, 1000)
        self.assertEqual(store.load(), 1000)

    def test_undo_keeps_best_score(self):
        """Undo restores the score, not the best score."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        session = GameSession.from_board(board, seed=0)
        session.move(Direction.LEFT)
        session.undo()

        self.assertEqual(session.score, 0)
        self.assertEqual(session.best_score, 4)


if __name__ == '__main__':
    main()
