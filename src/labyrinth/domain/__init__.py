"""Maze domain model: rooms, doors and the graph that joins them."""

from .entities import Door, Maze, MazeListener, Room
from .errors import (
    DuplicateDoorError,
    DuplicateRoomError,
    IncompleteMazeError,
    MazeError,
    MazeFinishedError,
    SelfLoopError,
    ThemeMismatchError,
    UnknownDoorError,
    UnknownExemplarError,
    UnknownRoomError,
)
from .value_objects import CLASSIC, ENCHANTED, EventKind, MazeEvent, door_key

__all__ = [
    "CLASSIC",
    "ENCHANTED",
    "Door",
    "DuplicateDoorError",
    "DuplicateRoomError",
    "EventKind",
    "IncompleteMazeError",
    "Maze",
    "MazeError",
    "MazeEvent",
    "MazeFinishedError",
    "MazeListener",
    "Room",
    "SelfLoopError",
    "ThemeMismatchError",
    "UnknownDoorError",
    "UnknownExemplarError",
    "UnknownRoomError",
    "door_key",
]
