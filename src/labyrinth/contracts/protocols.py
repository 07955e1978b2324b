"""Capability protocols shared by the maze construction strategies.

Builders depend on these protocols rather than on concrete factories or
registries, so any creation idiom can be swapped in without touching the
graph validation that lives in ``Maze``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from labyrinth.domain.entities import Door, Maze, Room


@runtime_checkable
class ComponentFactoryProtocol(Protocol):
    """Produces matched Rooms and Doors of a single family.

    Every component a factory returns carries the factory's ``theme``.
    Components are returned unplaced; the caller assigns their identity when
    inserting them into a maze.

    Example:
        ```python
        def furnish(factory: ComponentFactoryProtocol, maze: Maze) -> None:
            maze.add_room(1, factory.create_room())
        ```
    """

    @property
    def theme(self) -> str:
        """Family tag bound at construction time."""
        ...

    def create_room(self) -> "Room":
        """Return a new, unplaced room tagged with this factory's theme."""
        ...

    def create_door(self) -> "Door":
        """Return a new, unplaced door tagged with this factory's theme."""
        ...


@runtime_checkable
class MazeBuilderProtocol(Protocol):
    """Stages a maze incrementally, independent of how parts are produced.

    All implementations share the same numbering and connectivity contract;
    they differ only in the attributes of the rooms and doors they insert.

    Example:
        ```python
        def two_rooms(builder: MazeBuilderProtocol) -> Maze:
            builder.build_room(1)
            builder.build_room(2)
            builder.build_door(1, 2)
            return builder.finish()
        ```
    """

    def build_room(self, number: int) -> "Room":
        """Add a room.

        Raises:
            DuplicateRoomError: If the number is already built.
        """
        ...

    def build_door(self, room_a: int, room_b: int) -> "Door":
        """Connect two built rooms.

        Raises:
            SelfLoopError: If both numbers are equal.
            UnknownRoomError: If either room was not built.
            DuplicateDoorError: If the rooms are already connected.
        """
        ...

    def finish(self) -> "Maze":
        """Return the assembled maze. Repeated calls return the same maze.

        Raises:
            IncompleteMazeError: If no room was built.
        """
        ...


__all__ = [
    "ComponentFactoryProtocol",
    "MazeBuilderProtocol",
]
