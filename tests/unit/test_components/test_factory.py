"""Tests for the themed component factories."""

from __future__ import annotations

import pytest

from labyrinth.contracts import ComponentFactoryProtocol
from labyrinth.domain import Door, Room
from labyrinth.domain.components import (
    ClassicComponentFactory,
    EnchantedComponentFactory,
    ThemedComponentFactory,
    get_component_factory,
)


class TestThemedComponentFactory:
    """Tests for ThemedComponentFactory."""

    def test_components_carry_bound_theme(self) -> None:
        factory = ThemedComponentFactory("haunted")

        room = factory.create_room()
        door = factory.create_door()

        assert isinstance(room, Room)
        assert isinstance(door, Door)
        assert room.theme == door.theme == "haunted"

    def test_components_are_unplaced(self) -> None:
        factory = ThemedComponentFactory("haunted")

        assert factory.create_room().number is None
        assert factory.create_door().rooms is None
        assert factory.create_door().is_open is False

    def test_each_call_returns_new_component(self) -> None:
        factory = ThemedComponentFactory("haunted", room_features=("cobwebs",))

        first = factory.create_room()
        second = factory.create_room()
        first.features.append("a ghost")

        assert first is not second
        assert second.features == ["cobwebs"]

    @pytest.mark.parametrize("theme", ["", "   "])
    def test_blank_theme_is_rejected(self, theme: str) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            ThemedComponentFactory(theme)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ThemedComponentFactory("x"), ComponentFactoryProtocol)


class TestBuiltInFactories:
    """Tests for the classic and enchanted families."""

    def test_classic_family(self) -> None:
        factory = ClassicComponentFactory()

        assert factory.theme == "classic"
        assert factory.create_room().features == []
        assert factory.create_door().features == []

    def test_enchanted_family(self) -> None:
        factory = EnchantedComponentFactory()

        assert factory.theme == "enchanted"
        assert factory.create_room().features == ["magical items"]
        assert factory.create_door().features == ["a spell"]

    def test_family_never_mixes(self) -> None:
        factory = EnchantedComponentFactory()

        themes = {factory.create_room().theme for _ in range(5)}
        themes |= {factory.create_door().theme for _ in range(5)}

        assert themes == {"enchanted"}


class TestGetComponentFactory:
    """Tests for selecting a factory by theme."""

    def test_registered_theme_returns_dedicated_factory(self) -> None:
        assert isinstance(get_component_factory("classic"), ClassicComponentFactory)
        assert isinstance(get_component_factory("enchanted"), EnchantedComponentFactory)

    def test_unregistered_theme_returns_tagging_factory(self) -> None:
        factory = get_component_factory("volcanic")

        assert type(factory) is ThemedComponentFactory
        assert factory.theme == "volcanic"
        assert factory.create_room().features == []

    def test_empty_theme_raises(self) -> None:
        with pytest.raises(ValueError):
            get_component_factory("")
