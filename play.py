# -*- coding: utf-8 -*-
"""
Play the sliding-tile merge puzzle in a window.

Keys: arrows move, u undoes, n or backspace starts a new game, t toggles the theme, escape quits.
Dragging with the mouse moves in the drag direction.
"""
import argparse
import logging
from typing import Any

from slidemerge.config import GameConfig
from slidemerge.core.types import ChangeEvent, Direction
from slidemerge.envs import GameSession
from slidemerge.utils.storage import FileBestScore
from slidemerge.utils.swipe import KEY_BINDINGS, swipe_direction
from slidemerge.utils.windows import WindowBoard


def redraw(session: GameSession, window: WindowBoard, events: tuple[ChangeEvent, ...] = ()):
    """
    Redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    events: tuple
        Events of the last move, highlighted on the board
    """
    window.show_board(session.board, session.score, session.best_score, events, session.is_game_over)


def reset(session: GameSession, window: WindowBoard):
    """
    Start a new game and redraw the game board.
    """
    session.new_game()
    redraw(session, window)


def step(session: GameSession, window: WindowBoard, direction: Direction):
    """
    Apply a move to the game.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    direction: Direction
        Move to apply
    """
    outcome = session.move(direction)
    if not outcome.board_changed:
        return

    redraw(session, window, outcome.events)
    if outcome.terminal:
        print(f"Game over! Score: {session.score}")


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session
    window: WindowBoard
        Class to draw the game board
    event: Any
        Event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key in ("backspace", "n"):
        reset(session, window)
        return None

    if event.key == "u":
        if session.undo():
            redraw(session, window)
        return None

    if event.key == "t":
        window.toggle_theme()
        return None

    if event.key in KEY_BINDINGS:
        step(session, window, KEY_BINDINGS[event.key])
    return None


def swipe_handler(session: GameSession, window: WindowBoard, config: GameConfig, dx: float, dy: float):
    """
    Handle a mouse drag.
    """
    direction = swipe_direction(dx, dy, threshold=config.swipe_threshold)
    if direction is not None:
        step(session, window, direction)


def parse_arguments() -> GameConfig:
    """
    Build the configuration from the command line.
    """
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Sliding-tile merge puzzle")
    parser.add_argument("--seed", help="Seed of the tile generator", required=False, type=int, default=None)
    parser.add_argument("--best-score-file", required=False, type=str, default=str(defaults.best_score_path))
    parser.add_argument("--swipe-threshold", required=False, type=float, default=defaults.swipe_threshold)
    parser.add_argument("--theme", required=False, type=str, choices=["light", "dark"], default=defaults.theme)
    parser.add_argument("--log-level", required=False, type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    return GameConfig(
        best_score_path=args.best_score_file,
        swipe_threshold=args.swipe_threshold,
        seed=args.seed,
        theme=args.theme,
    )


if __name__ == "__main__":
    game_config = parse_arguments()
    game = GameSession(store=FileBestScore(game_config.best_score_path), seed=game_config.seed)

    window_board = WindowBoard(title="Slide & Merge", size=game_config.board_size, theme=game_config.theme)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))
    window_board.register_swipe_handler(lambda dx, dy: swipe_handler(game, window_board, game_config, dx, dy))

    reset(game, window_board)

    # Blocking event loop
    window_board.show(block=True)
