"""Registry of component factory families keyed by theme."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:
    from labyrinth.contracts.protocols import ComponentFactoryProtocol

F = TypeVar("F", bound=type)

logger = logging.getLogger(__name__)


class FactoryRegistry:
    """Singleton registry for component factory families.

    Each registered class must be constructible without arguments and
    produce components of exactly one theme. Themes are free-form,
    lower-case identifiers such as 'classic' or 'enchanted'.

    Example:
        @factory_registry.register("haunted")
        class HauntedComponentFactory(ThemedComponentFactory):
            def __init__(self) -> None:
                super().__init__("haunted", room_features=("cobwebs",))

        factory = factory_registry.get("haunted")()
    """

    _instance: FactoryRegistry | None = None
    _factories: dict[str, type[ComponentFactoryProtocol]]

    def __new__(cls) -> FactoryRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._factories = {}
        return cls._instance

    def register(self, theme: str) -> Callable[[F], F]:
        """Decorator to register a factory class for a theme.

        Raises:
            ValueError: If the theme is already registered or is not a
                lower-case identifier.
        """

        def decorator(cls: F) -> F:
            if theme in self._factories:
                raise ValueError(f"Theme '{theme}' already registered")
            self._validate_theme(theme)
            self._factories[theme] = cls
            logger.debug(f"Registered component factory '{theme}': {cls.__name__}")
            return cls

        return decorator

    def get(self, theme: str) -> type[ComponentFactoryProtocol]:
        """Get the factory class registered for a theme.

        Raises:
            KeyError: If no factory is registered for the theme.
        """
        if theme not in self._factories:
            raise KeyError(f"Unknown theme: {theme}")
        return self._factories[theme]

    def is_registered(self, theme: str) -> bool:
        return theme in self._factories

    def list(self) -> list[str]:
        """Sorted list of registered themes."""
        return sorted(self._factories.keys())

    def unregister(self, theme: str) -> None:
        """Remove a theme. Unknown themes are ignored."""
        self._factories.pop(theme, None)

    def _validate_theme(self, theme: str) -> None:
        if not theme or theme != theme.strip().lower() or " " in theme:
            raise ValueError(
                f"Invalid theme '{theme}': must be a non-empty lower-case identifier"
            )


factory_registry = FactoryRegistry()
