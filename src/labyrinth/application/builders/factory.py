"""Factory for creating maze builders by strategy name.

The MazeBuilderFactory keeps the strategy selection in one place so callers
(CLI, config-driven construction) can pick a creation idiom by name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.domain.components.factory import get_component_factory
from labyrinth.domain.components.prototype import (
    PrototypeRegistry,
    default_prototype_registry,
)
from labyrinth.domain.errors import MazeError
from labyrinth.domain.value_objects import CLASSIC, ENCHANTED

from .abstract_factory import FactoryMazeBuilder
from .direct import DirectMazeBuilder
from .factory_method import (
    ClassicMazeCreator,
    EnchantedMazeCreator,
    MazeCreator,
    ThemedMazeCreator,
)
from .prototype import PrototypeMazeBuilder

if TYPE_CHECKING:
    from .base import BaseMazeBuilder

DIRECT = "direct"
ABSTRACT_FACTORY = "abstract_factory"
FACTORY_METHOD = "factory_method"
PROTOTYPE = "prototype"

STRATEGIES: tuple[str, ...] = (DIRECT, ABSTRACT_FACTORY, FACTORY_METHOD, PROTOTYPE)

_CREATORS: dict[str, type[MazeCreator]] = {
    CLASSIC: ClassicMazeCreator,
    ENCHANTED: EnchantedMazeCreator,
}


class UnknownStrategyError(MazeError):
    """Raised when a construction strategy name is not recognized."""

    def __init__(self, strategy: str) -> None:
        self.strategy = strategy
        super().__init__(
            f"Unknown strategy: {strategy}. Available: {', '.join(STRATEGIES)}"
        )


class MazeBuilderFactory:
    """Factory for creating maze builder instances.

    Strategy selection:
    1. 'direct': DirectMazeBuilder tagging plain parts with the theme
    2. 'abstract_factory': FactoryMazeBuilder over the theme's component factory
    3. 'factory_method': the theme's MazeCreator subclass
    4. 'prototype': PrototypeMazeBuilder cloning the theme's exemplars

    Example:
        ```python
        factory = MazeBuilderFactory()
        builder = factory.create_builder("prototype", "enchanted")
        maze = MazeDirector().construct(builder)
        ```
    """

    def __init__(self, prototypes: PrototypeRegistry | None = None) -> None:
        self._prototypes = prototypes

    @property
    def prototypes(self) -> PrototypeRegistry:
        """Exemplar registry for the prototype strategy, seeded on first use."""
        if self._prototypes is None:
            self._prototypes = default_prototype_registry()
        return self._prototypes

    def create_builder(self, strategy: str, theme: str = CLASSIC) -> "BaseMazeBuilder":
        """Create a fresh builder for the given strategy and theme.

        Raises:
            UnknownStrategyError: If the strategy name is not recognized.
            UnknownExemplarError: If the prototype strategy has no exemplars
                for the theme.
            ValueError: If the theme is empty.
        """
        if strategy == DIRECT:
            return DirectMazeBuilder(theme)
        if strategy == ABSTRACT_FACTORY:
            return FactoryMazeBuilder(get_component_factory(theme))
        if strategy == FACTORY_METHOD:
            creator_cls = _CREATORS.get(theme)
            if creator_cls is None:
                return ThemedMazeCreator(theme)
            return creator_cls()
        if strategy == PROTOTYPE:
            return PrototypeMazeBuilder(self.prototypes, theme)
        raise UnknownStrategyError(strategy)


__all__ = [
    "ABSTRACT_FACTORY",
    "DIRECT",
    "FACTORY_METHOD",
    "MazeBuilderFactory",
    "PROTOTYPE",
    "STRATEGIES",
    "UnknownStrategyError",
]
