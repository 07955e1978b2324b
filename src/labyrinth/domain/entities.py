"""Domain entities for maze construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator

from .errors import (
    DuplicateDoorError,
    DuplicateRoomError,
    MazeFinishedError,
    SelfLoopError,
    UnknownDoorError,
    UnknownRoomError,
)
from .value_objects import CLASSIC, EventKind, MazeEvent, door_key

logger = logging.getLogger(__name__)

MazeListener = Callable[[MazeEvent], None]


@dataclass
class Room:
    """A node of the maze graph.

    Attributes:
        theme: Family tag bound by whoever produced the room.
        features: Flavor carried by the family (e.g. "magical items").
        visited: Set once the room has been entered.
        number: Identity within a maze, read-only. None until a maze places
            the room; only ``Maze.add_room`` assigns it.
    """

    theme: str = CLASSIC
    features: list[str] = field(default_factory=list)
    visited: bool = False
    _number: int | None = field(default=None, init=False)

    @property
    def number(self) -> int | None:
        return self._number

    def clone(self) -> Room:
        """Return an unplaced, unvisited copy sharing no mutable state."""
        return Room(theme=self.theme, features=list(self.features))

    def describe(self) -> str:
        """One-line description, e.g. 'Enchanted room 1 with magical items'."""
        text = f"{self.theme.capitalize()} room"
        if self._number is not None:
            text += f" {self._number}"
        if self.features:
            text += " with " + " and ".join(self.features)
        return text


@dataclass
class Door:
    """An edge of the maze graph connecting two distinct rooms.

    Attributes:
        theme: Family tag bound by whoever produced the door.
        features: Flavor carried by the family (e.g. "a spell").
        is_open: Doors start closed and are opened by traversal.
        rooms: Normalized (low, high) pair of room numbers, read-only. None
            until ``Maze.add_door`` places the door.
    """

    theme: str = CLASSIC
    features: list[str] = field(default_factory=list)
    is_open: bool = False
    _rooms: tuple[int, int] | None = field(default=None, init=False)

    @property
    def rooms(self) -> tuple[int, int] | None:
        return self._rooms

    def clone(self) -> Door:
        """Return an unplaced, closed copy sharing no mutable state."""
        return Door(theme=self.theme, features=list(self.features))

    def describe(self) -> str:
        """One-line description, e.g. 'Classic door between rooms 1 and 2'."""
        text = f"{self.theme.capitalize()} door"
        if self.features:
            text += " with " + " and ".join(self.features)
        if self._rooms is not None:
            text += f" between rooms {self._rooms[0]} and {self._rooms[1]}"
        return text


class Maze:
    """A graph of rooms joined by doors.

    Rooms are keyed by number and doors by the unordered pair of rooms they
    connect. Every door's endpoints are always present in the room mapping;
    all validation happens before any mutation, so a failed call leaves the
    maze unchanged.

    Callers get read-only views only. Mutation goes through ``add_room`` and
    ``add_door``, which builders call on the caller's behalf. A builder seals
    the maze when it finishes; after that both raise MazeFinishedError.

    Example:
        maze = Maze(theme="classic")
        maze.add_room(1)
        maze.add_room(2)
        maze.add_door(1, 2)
        maze.traverse(1, 2)
    """

    def __init__(self, theme: str = CLASSIC) -> None:
        self.theme = theme
        self._rooms: dict[int, Room] = {}
        self._doors: dict[tuple[int, int], Door] = {}
        self._listeners: list[MazeListener] = []
        self._sealed = False

    def __repr__(self) -> str:
        return (
            f"Maze(theme={self.theme!r}, rooms={len(self._rooms)}, "
            f"doors={len(self._doors)})"
        )

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, number: object) -> bool:
        return number in self._rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Freeze the graph. Entering rooms and opening doors still work."""
        self._sealed = True

    @property
    def rooms(self) -> tuple[Room, ...]:
        """Rooms ordered by number."""
        return tuple(self._rooms[n] for n in sorted(self._rooms))

    @property
    def doors(self) -> tuple[Door, ...]:
        """Doors ordered by their room pair."""
        return tuple(self._doors[k] for k in sorted(self._doors))

    def get_room(self, number: int) -> Room:
        """Look up a room by number.

        Raises:
            UnknownRoomError: If the room is not in the maze.
        """
        try:
            return self._rooms[number]
        except KeyError:
            raise UnknownRoomError(number) from None

    def get_door(self, room_a: int, room_b: int) -> Door:
        """Look up the door joining two rooms, in either order.

        Raises:
            UnknownDoorError: If no door joins the rooms.
        """
        try:
            return self._doors[door_key(room_a, room_b)]
        except KeyError:
            raise UnknownDoorError(door_key(room_a, room_b)) from None

    def has_door(self, room_a: int, room_b: int) -> bool:
        return door_key(room_a, room_b) in self._doors

    def add_room(self, number: int, room: Room | None = None) -> Room:
        """Insert a room under the given number.

        Args:
            number: Non-negative room number, unique within this maze.
            room: Pre-built room (from a factory or a prototype clone). When
                omitted a plain room tagged with the maze theme is created.

        Returns:
            The inserted room, with its number assigned.

        Raises:
            ValueError: If the number is not a non-negative integer, or the
                room was already placed under another number.
            DuplicateRoomError: If the number is already taken.
            MazeFinishedError: If the maze is sealed.
        """
        if self._sealed:
            raise MazeFinishedError()
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValueError(f"Room number must be a non-negative integer, got {number!r}")
        if number in self._rooms:
            raise DuplicateRoomError(number)
        if room is None:
            room = Room(theme=self.theme)
        elif room.number is not None and room.number != number:
            raise ValueError(
                f"Room is already numbered {room.number}, cannot place it as {number}"
            )
        room._number = number
        self._rooms[number] = room
        logger.debug(f"Added {room.describe()}")
        return room

    def add_door(self, room_a: int, room_b: int, door: Door | None = None) -> Door:
        """Connect two existing, distinct rooms with a door.

        Args:
            room_a: First endpoint.
            room_b: Second endpoint. Order does not matter.
            door: Pre-built door. When omitted a plain door tagged with the
                maze theme is created.

        Returns:
            The inserted door, with its room pair assigned.

        Raises:
            SelfLoopError: If both endpoints are the same room.
            UnknownRoomError: If either endpoint is not in the maze.
            DuplicateDoorError: If the rooms are already connected.
            ValueError: If the door was already placed between other rooms.
            MazeFinishedError: If the maze is sealed.
        """
        if self._sealed:
            raise MazeFinishedError()
        if room_a == room_b:
            raise SelfLoopError(room_a)
        for number in (room_a, room_b):
            if number not in self._rooms:
                raise UnknownRoomError(number)
        key = door_key(room_a, room_b)
        if key in self._doors:
            raise DuplicateDoorError(key)
        if door is None:
            door = Door(theme=self.theme)
        elif door.rooms is not None and door.rooms != key:
            raise ValueError(
                f"Door already joins rooms {door.rooms}, cannot place it at {key}"
            )
        door._rooms = key
        self._doors[key] = door
        logger.debug(f"Added {door.describe()}")
        return door

    def enter(self, number: int) -> Room:
        """Enter a room, marking it visited and notifying listeners.

        Raises:
            UnknownRoomError: If the room is not in the maze.
        """
        room = self.get_room(number)
        room.visited = True
        logger.info(f"Entered {room.describe()}")
        self._emit(MazeEvent(EventKind.ROOM_ENTERED, room=number))
        return room

    def traverse(self, from_room: int, to_room: int) -> Room:
        """Walk through the door between two rooms into ``to_room``.

        The door is opened on the first traversal; later traversals find it
        already open and emit no door event.

        Raises:
            UnknownRoomError: If either room is not in the maze.
            UnknownDoorError: If no door joins the rooms.
        """
        self.get_room(from_room)
        self.get_room(to_room)
        door = self.get_door(from_room, to_room)
        if not door.is_open:
            door.is_open = True
            logger.info(f"Opened {door.describe()}")
            self._emit(MazeEvent(EventKind.DOOR_OPENED, room=from_room, door=door.rooms))
        return self.enter(to_room)

    def subscribe(self, listener: MazeListener) -> None:
        """Register a callable to receive every MazeEvent."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: MazeListener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def describe(self) -> str:
        """Multi-line summary listing every room and door."""
        lines = [f"Maze ({self.theme})", "Rooms:"]
        lines.extend(f"  {room.describe()}" for room in self.rooms)
        lines.append("Doors:")
        lines.extend(f"  {door.describe()}" for door in self.doors)
        return "\n".join(lines)

    def _emit(self, event: MazeEvent) -> None:
        for listener in list(self._listeners):
            listener(event)


__all__ = [
    "Door",
    "Maze",
    "MazeListener",
    "Room",
]
