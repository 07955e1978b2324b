"""Tests for FactoryRegistry and theme registration."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from labyrinth.domain.components import (
    FactoryRegistry,
    ThemedComponentFactory,
    factory_registry,
    get_component_factory,
)


class TestFactoryRegistrySingleton:
    """Tests for FactoryRegistry singleton behavior."""

    def test_registry_is_singleton(self) -> None:
        assert FactoryRegistry() is FactoryRegistry()

    def test_module_level_registry_is_same_instance(self) -> None:
        assert factory_registry is FactoryRegistry()

    def test_built_in_themes_are_registered(self) -> None:
        assert {"classic", "enchanted"} <= set(factory_registry.list())


class TestFactoryRegistration:
    """Tests for registering families via decorator."""

    @pytest.fixture(autouse=True)
    def cleanup(self) -> Iterator[None]:
        """Remove test themes after each test."""
        yield
        for theme in ("haunted", "frozen"):
            factory_registry.unregister(theme)

    def test_register_with_decorator(self) -> None:
        @factory_registry.register("haunted")
        class HauntedComponentFactory(ThemedComponentFactory):
            def __init__(self) -> None:
                super().__init__("haunted", room_features=("cobwebs",))

        assert "haunted" in factory_registry.list()
        assert factory_registry.get("haunted") is HauntedComponentFactory

    def test_registered_factory_is_selected_by_theme(self) -> None:
        @factory_registry.register("frozen")
        class FrozenComponentFactory(ThemedComponentFactory):
            def __init__(self) -> None:
                super().__init__("frozen", door_features=("icicles",))

        factory = get_component_factory("frozen")

        assert isinstance(factory, FrozenComponentFactory)
        assert factory.create_door().features == ["icicles"]

    def test_duplicate_registration_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Theme 'classic' already registered"):

            @factory_registry.register("classic")
            class AnotherClassic(ThemedComponentFactory):
                pass

    @pytest.mark.parametrize("theme", ["", "Haunted", "two words", " haunted"])
    def test_invalid_theme_raises_value_error(self, theme: str) -> None:
        with pytest.raises(ValueError, match="Invalid theme"):

            @factory_registry.register(theme)
            class Bad(ThemedComponentFactory):
                pass

        assert theme not in factory_registry.list()

    def test_get_unknown_theme_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="Unknown theme: nowhere"):
            factory_registry.get("nowhere")
