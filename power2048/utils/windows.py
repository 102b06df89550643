# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
from typing import Callable

import numpy as np
from matplotlib import pyplot as plt

from power2048.core.gamemove import Direction
from power2048.envs.countdown import Ticker
from power2048.envs.powergame import GameSnapshot, GameStatus
from power2048.utils.inputs import swipe_direction
from power2048.utils.tiles import format_time, tile_level

STATUS_MESSAGES = {
    GameStatus.IN_PROGRESS: "",
    GameStatus.WON: "You reached the target tile!",
    GameStatus.LOST_NO_MOVES: "Game Over! No more moves.",
    GameStatus.LOST_TIME_UP: "Time's up!",
}


class WindowBoard:
    """
    Window to draw the power 2048 board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    # ##: Colors by palette level (tile exponent, 0 for empty cells).
    COLORS = {
        0: "#CDC1B4",
        1: "#EEE4DA",
        2: "#ECE0C8",
        3: "#ECB280",
        4: "#EC8D53",
        5: "#F57C5F",
        6: "#E95937",
        7: "#F3D96B",
        8: "#F2D04A",
        9: "#E5BF2E",
        10: "#E2B814",
        11: "#EBC502",
    }
    MERGED_EDGE = "#776E65"
    SPAWN_EDGE = "#00A2D8"

    def __init__(self, title: str, size: int):
        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor("#BBADA0")
        self.fig.canvas.manager.set_window_title(title)

        # ## ----> Keys belong to the game: drop the default bindings (s saves the figure, arrows browse views).
        if self.fig.canvas.manager.key_press_handler_id is not None:
            self.fig.canvas.mpl_disconnect(self.fig.canvas.manager.key_press_handler_id)

        self.axe.xaxis.set_ticks_position("none")
        self.axe.yaxis.set_ticks_position("none")
        _ = self.axe.set_xticklabels([])
        _ = self.axe.set_yticklabels([])

        # ## ----> Add cell for board.
        self.size = size
        self.textes = []
        self.axes = [
            self.fig.add_subplot(size, size, r * size + c) for r in range(0, size) for c in range(1, size + 1)
        ]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
            )
            self.textes.append(text)
        for _ax in self.axes:
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False
        self._press = None

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def show_snapshot(self, snapshot: GameSnapshot):
        """
        Show a game or update the game being shown.

        Parameters
        ----------
        snapshot: GameSnapshot
            Game to show
        """
        # ## ----> Update the cells.
        values = np.reshape(snapshot.board, -1)
        for index, (_ax, text, value) in enumerate(zip(self.axes, self.textes, values)):
            cell = divmod(index, self.size)
            text.set_text(str(int(value)) if value else "")
            _ax.set_facecolor(self.COLORS[tile_level(int(value), snapshot.base)])

            # ## ----> Outline the new tile and the merged tiles.
            edge = None
            if cell == snapshot.last_spawn:
                edge = self.SPAWN_EDGE
            elif cell in snapshot.merged_cells:
                edge = self.MERGED_EDGE
            for spine in _ax.spines.values():
                spine.set_edgecolor(edge or "black")
                spine.set_linewidth(3 if edge else 1)

        # ## ----> Update the header.
        header = (
            f"Base {snapshot.base}   Score: {snapshot.score}   Best: {snapshot.high_score}   "
            f"Time: {format_time(snapshot.time_remaining)}"
        )
        message = STATUS_MESSAGES[snapshot.status]
        self.fig.suptitle(f"{header}\n{message}" if message else header)

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_swipe_handler(self, swipe_handler: Callable[[Direction], None]):
        """
        Register a handler called with the direction of each mouse drag long enough to count as a swipe.

        Parameters
        ----------
        swipe_handler: Callable[[Direction], None]
            Swipe handler
        """

        def press(event):
            self._press = (event.x, event.y)

        def release(event):
            if self._press is None:
                return
            start_x, start_y = self._press
            self._press = None

            # ## ----> Matplotlib display coordinates grow upwards.
            direction = swipe_direction(event.x - start_x, start_y - event.y)
            if direction is not None:
                swipe_handler(direction)

        self.fig.canvas.mpl_connect("button_press_event", press)
        self.fig.canvas.mpl_connect("button_release_event", release)

    def new_ticker(self, interval_ms: int, callback: Callable[[], None]) -> Ticker:
        """
        Create a timer running on the window event loop.

        Parameters
        ----------
        interval_ms: int
            Interval between two calls, in milliseconds
        callback: Callable[[], None]
            Function to call

        Returns
        -------
        Ticker
            The timer, not started
        """
        timer = self.fig.canvas.new_timer(interval=interval_ms)
        timer.add_callback(callback)
        return timer

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close()
        self.closed = True
