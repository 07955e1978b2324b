"""Process-wide maze handle with lazy creation and explicit reset.

The handle owns at most one live Maze. The first ``get_instance`` call
creates it; later calls return the same object whatever theme they ask
for, until ``reset`` swaps in a new maze. Creation and reset run under one
lock, so concurrent first callers all observe a single instance and any
call ordered after a reset observes the new one.
"""

from __future__ import annotations

import logging
import threading

from labyrinth.domain.entities import Maze

logger = logging.getLogger(__name__)


class MazeHandle:
    """Lock-guarded cell holding one live Maze.

    Example:
        handle = MazeHandle()
        maze = handle.get_instance("classic")
        assert handle.get_instance("enchanted") is maze
        fresh = handle.reset("enchanted")
    """

    def __init__(self) -> None:
        self._maze: Maze | None = None
        self._lock = threading.Lock()

    @property
    def theme(self) -> str | None:
        """Theme of the live maze, or None when absent."""
        maze = self._maze
        return maze.theme if maze is not None else None

    def current(self) -> Maze | None:
        """The live maze, without creating one."""
        return self._maze

    def get_instance(self, theme: str) -> Maze:
        """Return the live maze, creating it with ``theme`` on first use.

        Once a maze exists the theme argument is ignored.
        """
        maze = self._maze
        if maze is None:
            with self._lock:
                if self._maze is None:
                    self._maze = Maze(theme=theme)
                    logger.info(f"Created singleton maze with theme '{theme}'")
                maze = self._maze
        if maze.theme != theme:
            logger.debug(
                f"Ignoring theme '{theme}'; singleton maze is '{maze.theme}'"
            )
        return maze

    def reset(self, theme: str) -> Maze:
        """Replace the live maze with a fresh one tagged ``theme``.

        The previous maze is not modified; it simply stops being reachable
        through this handle.
        """
        with self._lock:
            self._maze = Maze(theme=theme)
            logger.info(f"Reset singleton maze to theme '{theme}'")
            return self._maze


_default_handle = MazeHandle()


def get_instance(theme: str) -> Maze:
    """Return the process-wide maze, creating it on first use."""
    return _default_handle.get_instance(theme)


def reset(theme: str) -> Maze:
    """Replace the process-wide maze with a fresh one."""
    return _default_handle.reset(theme)


def current() -> Maze | None:
    """The process-wide maze, or None if it was never requested."""
    return _default_handle.current()


def get_handle() -> MazeHandle:
    """The process-wide handle backing the module-level functions."""
    return _default_handle


__all__ = [
    "MazeHandle",
    "current",
    "get_handle",
    "get_instance",
    "reset",
]
