"""Component factories producing themed rooms and doors as a family."""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.domain.entities import Door, Room
from labyrinth.domain.value_objects import CLASSIC, ENCHANTED

from .registry import factory_registry

if TYPE_CHECKING:
    from labyrinth.contracts.protocols import ComponentFactoryProtocol


class ThemedComponentFactory:
    """Factory binding one theme to every room and door it creates.

    The theme and the per-family features are fixed at construction, so
    ``create_room`` and ``create_door`` cannot fail and never mix families.

    Args:
        theme: Family tag. Must be a non-empty string.
        room_features: Features copied into every room.
        door_features: Features copied into every door.

    Raises:
        ValueError: If the theme is empty.
    """

    def __init__(
        self,
        theme: str,
        room_features: tuple[str, ...] = (),
        door_features: tuple[str, ...] = (),
    ) -> None:
        if not isinstance(theme, str) or not theme.strip():
            raise ValueError("Theme must be a non-empty string")
        self._theme = theme
        self._room_features = tuple(room_features)
        self._door_features = tuple(door_features)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(theme={self._theme!r})"

    @property
    def theme(self) -> str:
        return self._theme

    def create_room(self) -> Room:
        return Room(theme=self._theme, features=list(self._room_features))

    def create_door(self) -> Door:
        return Door(theme=self._theme, features=list(self._door_features))


@factory_registry.register(CLASSIC)
class ClassicComponentFactory(ThemedComponentFactory):
    """Plain stone rooms and wooden doors."""

    def __init__(self) -> None:
        super().__init__(CLASSIC)


@factory_registry.register(ENCHANTED)
class EnchantedComponentFactory(ThemedComponentFactory):
    """Rooms holding magical items, doors sealed with a spell."""

    def __init__(self) -> None:
        super().__init__(
            ENCHANTED,
            room_features=("magical items",),
            door_features=("a spell",),
        )


def get_component_factory(theme: str) -> "ComponentFactoryProtocol":
    """Return a factory bound to ``theme``.

    Registered themes get their dedicated factory; any other theme gets a
    plain ThemedComponentFactory that only tags components.

    Raises:
        ValueError: If the theme is empty.
    """
    if factory_registry.is_registered(theme):
        return factory_registry.get(theme)()
    return ThemedComponentFactory(theme)


__all__ = [
    "ClassicComponentFactory",
    "EnchantedComponentFactory",
    "ThemedComponentFactory",
    "get_component_factory",
]
