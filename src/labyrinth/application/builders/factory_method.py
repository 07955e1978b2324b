"""Maze creators whose subclasses decide which rooms and doors to make."""

from __future__ import annotations

from abc import abstractmethod

from labyrinth.domain.entities import Door, Maze, Room
from labyrinth.domain.value_objects import CLASSIC, ENCHANTED

from .base import BaseMazeBuilder


class MazeCreator(BaseMazeBuilder):
    """Builder whose parts come from overridable factory methods.

    Subclasses override ``create_room`` and ``create_door``; everything
    else, including ``create_maze``, is shared.
    """

    def _make_room(self) -> Room:
        return self.create_room()

    def _make_door(self) -> Door:
        return self.create_door()

    @abstractmethod
    def create_room(self) -> Room:
        """Factory method for rooms."""

    @abstractmethod
    def create_door(self) -> Door:
        """Factory method for doors."""

    def create_maze(self) -> Maze:
        """Build two connected rooms and walk from the first into the second.

        Returns:
            The finished maze with both rooms visited and the door open.
        """
        self.build_room(1)
        self.build_room(2)
        self.build_door(1, 2)
        maze = self.finish()
        maze.enter(1)
        maze.traverse(1, 2)
        return maze


class ClassicMazeCreator(MazeCreator):
    def __init__(self) -> None:
        super().__init__(CLASSIC)

    def create_room(self) -> Room:
        return Room(theme=CLASSIC)

    def create_door(self) -> Door:
        return Door(theme=CLASSIC)


class EnchantedMazeCreator(MazeCreator):
    def __init__(self) -> None:
        super().__init__(ENCHANTED)

    def create_room(self) -> Room:
        return Room(theme=ENCHANTED, features=["magical items"])

    def create_door(self) -> Door:
        return Door(theme=ENCHANTED, features=["a spell"])


class ThemedMazeCreator(MazeCreator):
    """Creator for themes without a dedicated subclass; parts are only tagged."""

    def create_room(self) -> Room:
        return Room(theme=self.theme)

    def create_door(self) -> Door:
        return Door(theme=self.theme)
