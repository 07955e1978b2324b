"""Errors raised while assembling or querying a maze.

Every error is local and recoverable: the maze, builder or registry that
raised it is left exactly as it was before the failing call.
"""

from __future__ import annotations


class MazeError(Exception):
    """Base class for all maze construction and lookup errors."""


class DuplicateRoomError(MazeError):
    """Raised when a room number is already present in the maze."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Room {number} already exists")


class UnknownRoomError(MazeError):
    """Raised when a room number is not present in the maze."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Unknown room: {number}")


class SelfLoopError(MazeError):
    """Raised when a door would connect a room to itself."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"A door cannot connect room {number} to itself")


class DuplicateDoorError(MazeError):
    """Raised when two rooms are already connected by a door."""

    def __init__(self, rooms: tuple[int, int]) -> None:
        self.rooms = rooms
        super().__init__(f"Rooms {rooms[0]} and {rooms[1]} are already connected")


class UnknownDoorError(MazeError):
    """Raised when no door connects two rooms."""

    def __init__(self, rooms: tuple[int, int]) -> None:
        self.rooms = rooms
        super().__init__(f"No door between rooms {rooms[0]} and {rooms[1]}")


class IncompleteMazeError(MazeError):
    """Raised when a builder is finished before any room was built."""

    def __init__(self) -> None:
        super().__init__("Cannot finish a maze without rooms")


class MazeFinishedError(MazeError):
    """Raised when a finished builder or sealed maze is asked for more parts."""

    def __init__(self) -> None:
        super().__init__("Maze is already finished")


class ThemeMismatchError(MazeError):
    """Raised when a part belongs to a different family than its builder."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Exemplar '{name}' has theme '{actual}', expected '{expected}'"
        )


class UnknownExemplarError(MazeError):
    """Raised when a prototype name was never registered."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        message = f"Unknown exemplar: {name}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


__all__ = [
    "DuplicateDoorError",
    "DuplicateRoomError",
    "IncompleteMazeError",
    "MazeError",
    "MazeFinishedError",
    "SelfLoopError",
    "ThemeMismatchError",
    "UnknownDoorError",
    "UnknownExemplarError",
    "UnknownRoomError",
]
