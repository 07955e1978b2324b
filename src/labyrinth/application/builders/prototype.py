"""Builder that clones every part from registered exemplars."""

from __future__ import annotations

from labyrinth.domain.components.prototype import Exemplar, PrototypeRegistry
from labyrinth.domain.entities import Door, Room
from labyrinth.domain.errors import ThemeMismatchError, UnknownExemplarError

from .base import BaseMazeBuilder


class PrototypeMazeBuilder(BaseMazeBuilder):
    """Builds a maze from the '<theme>.room' and '<theme>.door' exemplars.

    Both exemplars are checked at construction so a missing, mistyped or
    foreign-family exemplar is reported before anything is built. Every clone
    is checked again, since the registry may change while building.

    Raises:
        UnknownExemplarError: If either exemplar is missing from the registry.
        TypeError: If an exemplar is not a Room or Door respectively.
        ThemeMismatchError: If an exemplar is tagged with another theme.
    """

    def __init__(self, registry: PrototypeRegistry, theme: str) -> None:
        self._room_name = f"{theme}.room"
        self._door_name = f"{theme}.door"
        for name in (self._room_name, self._door_name):
            if name not in registry:
                raise UnknownExemplarError(name, registry.names())
        super().__init__(theme)
        self._registry = registry
        self._make_room()
        self._make_door()

    def _make_room(self) -> Room:
        room = self._registry.clone(self._room_name)
        if not isinstance(room, Room):
            raise TypeError(f"Exemplar '{self._room_name}' is not a Room")
        self._check_theme(self._room_name, room)
        return room

    def _make_door(self) -> Door:
        door = self._registry.clone(self._door_name)
        if not isinstance(door, Door):
            raise TypeError(f"Exemplar '{self._door_name}' is not a Door")
        self._check_theme(self._door_name, door)
        return door

    def _check_theme(self, name: str, part: Exemplar) -> None:
        if part.theme != self.theme:
            raise ThemeMismatchError(name, expected=self.theme, actual=part.theme)
