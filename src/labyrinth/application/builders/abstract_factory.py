"""Builder that obtains its parts from a component factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.domain.entities import Door, Room

from .base import BaseMazeBuilder

if TYPE_CHECKING:
    from labyrinth.contracts.protocols import ComponentFactoryProtocol


class FactoryMazeBuilder(BaseMazeBuilder):
    """Builds a maze whose rooms and doors all come from one factory.

    Swapping the factory changes the family of every part while the
    construction calls stay exactly the same.

    Example:
        builder = FactoryMazeBuilder(EnchantedComponentFactory())
        builder.build_room(1)
    """

    def __init__(self, factory: "ComponentFactoryProtocol") -> None:
        super().__init__(factory.theme)
        self._factory = factory

    @property
    def factory(self) -> "ComponentFactoryProtocol":
        return self._factory

    def _make_room(self) -> Room:
        return self._factory.create_room()

    def _make_door(self) -> Door:
        return self._factory.create_door()
