"""Builder that creates rooms and doors directly."""

from __future__ import annotations

from labyrinth.domain.entities import Door, Room
from labyrinth.domain.value_objects import CLASSIC

from .base import BaseMazeBuilder


class DirectMazeBuilder(BaseMazeBuilder):
    """Builds plain rooms and doors tagged with the builder's theme.

    No factory or registry is consulted; the maze itself creates each part.
    """

    def __init__(self, theme: str = CLASSIC) -> None:
        super().__init__(theme)

    def _make_room(self) -> Room | None:
        return None

    def _make_door(self) -> Door | None:
        return None
