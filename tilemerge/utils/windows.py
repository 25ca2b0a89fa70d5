# -*- coding: utf-8 -*-
"""
Display the sliding-tile board in a Matplotlib window and forward key presses.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    Window drawing a rectangular board of tiles, one subplot per cell.

    Notes
    -----
    - Empty cells are drawn without text.
    - Tiles above the highest known value reuse the last color.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
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
    HIGH_TILE_COLOR = "#9ED682"

    def __init__(self, title: str, rows: int, cols: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        rows : int
            Number of rows of the board.
        cols : int
            Number of columns of the board.
        """
        self.rows = rows
        self.cols = cols
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes()
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self):
        """Create one cell per tile on top of the board background."""
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [
            self.fig.add_subplot(self.rows, self.cols, r * self.cols + c + 1)
            for r in range(self.rows)
            for c in range(self.cols)
        ]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_image(self, board: ndarray, title: Optional[str] = None):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The board to draw, of shape ``(rows, cols)``.
        title : str, optional
            Text shown above the board, e.g. the score.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, self.HIGH_TILE_COLOR))
        if title is not None:
            self.fig.suptitle(title)

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the game window."""
        plt.close(self.fig)
        self.closed = True
