"""Value objects for the maze domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Built-in component families. Any other non-empty string is also a valid
# theme; it is carried as a tag and never interpreted.
CLASSIC = "classic"
ENCHANTED = "enchanted"


class EventKind(str, Enum):
    """Observable events emitted by a maze."""

    ROOM_ENTERED = "room_entered"
    DOOR_OPENED = "door_opened"


@dataclass(frozen=True)
class MazeEvent:
    """A single observation emitted while walking a maze.

    Attributes:
        kind: What happened.
        room: Number of the room entered, or the room the door was opened from.
        door: Normalized room pair of the opened door, None for room events.
    """

    kind: EventKind
    room: int
    door: tuple[int, int] | None = None


def door_key(room_a: int, room_b: int) -> tuple[int, int]:
    """Normalize an unordered pair of room numbers.

    >>> door_key(2, 1)
    (1, 2)
    """
    return (room_a, room_b) if room_a <= room_b else (room_b, room_a)


__all__ = [
    "CLASSIC",
    "ENCHANTED",
    "EventKind",
    "MazeEvent",
    "door_key",
]
