"""Prototype registry holding named exemplar rooms and doors."""

from __future__ import annotations

import logging
from typing import Union

from labyrinth.domain.entities import Door, Room
from labyrinth.domain.errors import UnknownExemplarError
from labyrinth.domain.value_objects import CLASSIC, ENCHANTED

from .factory import ClassicComponentFactory, EnchantedComponentFactory

logger = logging.getLogger(__name__)

Exemplar = Union[Room, Door]


class PrototypeRegistry:
    """Named exemplars that are duplicated instead of configured from scratch.

    Exemplars live outside any maze. The registry stores its own copy of each
    exemplar and hands out fresh copies from ``clone``; no two of these ever
    share mutable state, so changing a clone never touches the exemplar or
    any clone handed out earlier.

    Names follow the '<theme>.<kind>' convention used by
    PrototypeMazeBuilder, e.g. 'classic.room' or 'enchanted.door', but any
    string is accepted.

    Example:
        registry = PrototypeRegistry()
        registry.register("classic.room", Room(theme="classic"))
        room = registry.clone("classic.room")
    """

    def __init__(self) -> None:
        self._exemplars: dict[str, Exemplar] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._exemplars

    def __len__(self) -> int:
        return len(self._exemplars)

    def register(self, name: str, exemplar: Exemplar) -> None:
        """Store ``exemplar`` under ``name``, replacing any previous one.

        The registry keeps a copy, so later changes to the object passed in
        do not leak into future clones.
        """
        if name in self._exemplars:
            logger.warning(f"Overwriting existing exemplar '{name}'")
        self._exemplars[name] = exemplar.clone()
        logger.debug(f"Registered exemplar '{name}': {exemplar.describe()}")

    def unregister(self, name: str) -> None:
        """Remove an exemplar.

        Raises:
            UnknownExemplarError: If the name was never registered.
        """
        if name not in self._exemplars:
            raise UnknownExemplarError(name, self.names())
        del self._exemplars[name]

    def clone(self, name: str) -> Exemplar:
        """Return an independent, unplaced copy of the named exemplar.

        Raises:
            UnknownExemplarError: If the name was never registered.
        """
        if name not in self._exemplars:
            raise UnknownExemplarError(name, self.names())
        return self._exemplars[name].clone()

    def names(self) -> list[str]:
        """Sorted list of registered exemplar names."""
        return sorted(self._exemplars.keys())


def default_prototype_registry() -> PrototypeRegistry:
    """Registry seeded with room and door exemplars for the built-in themes."""
    registry = PrototypeRegistry()
    for theme, factory in (
        (CLASSIC, ClassicComponentFactory()),
        (ENCHANTED, EnchantedComponentFactory()),
    ):
        registry.register(f"{theme}.room", factory.create_room())
        registry.register(f"{theme}.door", factory.create_door())
    return registry


__all__ = [
    "Exemplar",
    "PrototypeRegistry",
    "default_prototype_registry",
]
