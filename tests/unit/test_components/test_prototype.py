"""Tests for PrototypeRegistry."""

from __future__ import annotations

import logging

import pytest

from labyrinth.domain import Door, Room, UnknownExemplarError
from labyrinth.domain.components import PrototypeRegistry, default_prototype_registry


@pytest.fixture
def registry() -> PrototypeRegistry:
    registry = PrototypeRegistry()
    registry.register("classicRoom", Room(theme="classic", features=["torches"]))
    registry.register("classicDoor", Door(theme="classic"))
    return registry


class TestPrototypeRegistry:
    """Tests for registering and cloning exemplars."""

    def test_clone_returns_equal_but_distinct_components(
        self, registry: PrototypeRegistry
    ) -> None:
        first = registry.clone("classicRoom")
        second = registry.clone("classicRoom")

        assert first == second
        assert first is not second
        assert first.features is not second.features

    def test_mutating_clone_does_not_leak(self, registry: PrototypeRegistry) -> None:
        first = registry.clone("classicRoom")
        second = registry.clone("classicRoom")

        first.theme = "enchanted"
        first.features.append("magical items")

        assert second.theme == "classic"
        assert second.features == ["torches"]
        third = registry.clone("classicRoom")
        assert third.theme == "classic"
        assert third.features == ["torches"]

    def test_mutating_registered_object_does_not_alter_exemplar(self) -> None:
        registry = PrototypeRegistry()
        exemplar = Room(theme="classic", features=["torches"])
        registry.register("room", exemplar)

        exemplar.features.clear()
        exemplar.theme = "changed"

        clone = registry.clone("room")
        assert clone.theme == "classic"
        assert clone.features == ["torches"]

    def test_clone_is_unplaced(self, registry: PrototypeRegistry) -> None:
        assert registry.clone("classicRoom").number is None
        assert registry.clone("classicDoor").rooms is None

    def test_walked_exemplar_clones_fresh(self) -> None:
        registry = PrototypeRegistry()
        registry.register("room", Room(theme="classic", visited=True))
        registry.register("door", Door(theme="classic", is_open=True))

        assert registry.clone("room").visited is False
        assert registry.clone("door").is_open is False

    def test_clone_unknown_raises(self, registry: PrototypeRegistry) -> None:
        with pytest.raises(UnknownExemplarError) as exc_info:
            registry.clone("missing")

        assert exc_info.value.name == "missing"
        assert exc_info.value.available == ["classicDoor", "classicRoom"]
        assert registry.names() == ["classicDoor", "classicRoom"]

    def test_register_overwrites_and_warns(
        self, registry: PrototypeRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            registry.register("classicRoom", Room(theme="gothic"))

        assert registry.clone("classicRoom").theme == "gothic"
        assert "Overwriting existing exemplar 'classicRoom'" in caplog.text

    def test_unregister(self, registry: PrototypeRegistry) -> None:
        registry.unregister("classicDoor")

        assert "classicDoor" not in registry
        with pytest.raises(UnknownExemplarError):
            registry.unregister("classicDoor")


class TestDefaultPrototypeRegistry:
    def test_seeded_with_built_in_themes(self) -> None:
        registry = default_prototype_registry()

        assert registry.names() == [
            "classic.door",
            "classic.room",
            "enchanted.door",
            "enchanted.room",
        ]
        assert registry.clone("enchanted.room").features == ["magical items"]
        assert registry.clone("enchanted.door").features == ["a spell"]

    def test_each_call_returns_independent_registry(self) -> None:
        first = default_prototype_registry()
        second = default_prototype_registry()

        first.unregister("classic.room")

        assert "classic.room" in second
