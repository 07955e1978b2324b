"""Shared staging logic for every maze construction strategy.

Concrete builders only decide how a room or door is produced. Numbering,
connectivity validation and the finish contract live here and in ``Maze``,
so they are identical across strategies.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from labyrinth.domain.entities import Door, Maze, Room
from labyrinth.domain.errors import IncompleteMazeError, MazeFinishedError

logger = logging.getLogger(__name__)


class BaseMazeBuilder(ABC):
    """Template for builders implementing MazeBuilderProtocol.

    Subclasses implement ``_make_room`` and ``_make_door``. Returning None
    lets the maze create a plain component tagged with the builder's theme.
    """

    def __init__(self, theme: str) -> None:
        if not isinstance(theme, str) or not theme.strip():
            raise ValueError("Theme must be a non-empty string")
        self._theme = theme
        self._maze = Maze(theme=theme)
        self._finished = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(theme={self._theme!r})"

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def is_finished(self) -> bool:
        return self._finished

    def build_room(self, number: int) -> Room:
        self._ensure_open()
        room = self._maze.add_room(number, self._make_room())
        logger.debug(f"{type(self).__name__} built room {number}")
        return room

    def build_door(self, room_a: int, room_b: int) -> Door:
        self._ensure_open()
        door = self._maze.add_door(room_a, room_b, self._make_door())
        logger.debug(f"{type(self).__name__} built door {room_a}-{room_b}")
        return door

    def finish(self) -> Maze:
        """Return the assembled maze.

        Idempotent: later calls return the same maze without rebuilding.

        Raises:
            IncompleteMazeError: If no room was built. The builder stays usable.
        """
        if self._finished:
            return self._maze
        if len(self._maze) == 0:
            raise IncompleteMazeError()
        self._finished = True
        self._maze.seal()
        logger.debug(f"{type(self).__name__} finished {self._maze!r}")
        return self._maze

    def _ensure_open(self) -> None:
        if self._finished:
            raise MazeFinishedError()

    @abstractmethod
    def _make_room(self) -> Room | None:
        """Produce the next room to insert."""

    @abstractmethod
    def _make_door(self) -> Door | None:
        """Produce the next door to insert."""
