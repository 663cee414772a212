# -*- coding: utf-8 -*-
"""
Graphical host for the sliding-tile merge puzzle.

This module draws the board, the score and the best score in a Matplotlib window. Merge and new-tile
events are highlighted for one frame, a banner is shown when the game is over, and keyboard presses and
mouse drags are forwarded to handlers registered by the caller.
"""
from typing import Callable, Iterable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event, MouseEvent
from numpy import ndarray

from slidemerge.core.types import ChangeEvent, EventKind

# ##: Palettes for the light and dark themes.
THEME_COLORS = {
    "light": {"background": "#BBADA0", "empty": "#CCC0B3", "text": "#776E65", "banner": "#776E65"},
    "dark": {"background": "#3C3A32", "empty": "#4E4A40", "text": "#F9F6F2", "banner": "#F9F6F2"},
}

# ##: Outline colour of highlighted cells, per event kind.
EVENT_COLORS = {EventKind.MERGE: "#F65E3B", EventKind.NEW_TILE: "#EDC22E"}


class WindowBoard:
    """
    A class for rendering the game board using Matplotlib.

    Methods
    -------
    show_board(board, score, best_score, events=(), game_over=False)
        Update the display with the current game state.
    toggle_theme()
        Switch between the light and dark palettes.
    register_key_handler(key_handler)
        Register a function to handle keyboard events.
    register_swipe_handler(swipe_handler)
        Register a function receiving the (dx, dy) vector of each mouse drag.
    show(block=True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }

    def __init__(self, title: str, size: int, theme: str = "light"):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board.
        theme : str, optional
            Either ``"light"`` or ``"dark"`` (default is ``"light"``).
        """
        self.size = size
        self.theme = theme
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self._press: Optional[tuple[float, float]] = None
        self._last_frame: Optional[tuple] = None
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up one sub-axis per cell, below a header line for the scores.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_axis_off()

        self.header = self.fig.suptitle("", fontsize="large", fontweight="bold")
        self.banner = self.fig.text(0.5, 0.45, "", ha="center", va="center", fontsize="xx-large", fontweight="bold")

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_board(
        self,
        board: ndarray,
        score: int,
        best_score: int,
        events: Iterable[ChangeEvent] = (),
        game_over: bool = False,
    ):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current board.
        score : int
            The current score.
        best_score : int
            The best score so far.
        events : Iterable[ChangeEvent], optional
            Events of the last move; their cells are outlined until the next update.
        game_over : bool, optional
            Whether to show the game-over banner.
        """
        events = tuple(events)
        self._last_frame = (board.copy(), score, best_score, game_over)
        palette = THEME_COLORS[self.theme]
        outlines = {event.position.row * self.size + event.position.col: EVENT_COLORS[event.kind] for event in events}

        self.fig.set_facecolor(palette["background"])
        self.header.set_text(f"Score: {score}    Best: {best_score}")
        self.header.set_color(palette["text"])
        self.banner.set_text("Game over!" if game_over else "")
        self.banner.set_color(palette["banner"])

        for index, (ax, text, value) in enumerate(zip(self.axes, self.texts, board.flat)):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#776E65" if 0 < value <= 4 else "#F9F6F2")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32") if value else palette["empty"])

            color = outlines.get(index, palette["background"])
            for spine in ax.spines.values():
                spine.set_edgecolor(color)
                spine.set_linewidth(3 if index in outlines else 1)

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def toggle_theme(self):
        """Switch between the light and dark themes and redraw the last frame without highlights."""
        self.theme = "dark" if self.theme == "light" else "light"
        if self._last_frame is not None:
            board, score, best_score, game_over = self._last_frame
            self.show_board(board, score, best_score, game_over=game_over)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_swipe_handler(self, swipe_handler: Callable[[float, float], None]):
        """
        Register a mouse drag handler.

        Parameters
        ----------
        swipe_handler : Callable[[float, float], None]
            Called with ``(dx, dy)`` in pixels when the mouse button is released. ``dy`` is positive
            downwards, like screen coordinates.
        """

        def on_press(event: MouseEvent):
            self._press = (event.x, event.y)

        def on_release(event: MouseEvent):
            if self._press is None:
                return
            start_x, start_y = self._press
            self._press = None

            # ##: Matplotlib display coordinates grow upwards.
            swipe_handler(event.x - start_x, start_y - event.y)

        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("button_release_event", on_release)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
