"""Maze construction strategies.

Every builder implements MazeBuilderProtocol on top of BaseMazeBuilder, so
room numbering and door validation behave the same whichever is chosen.

Available Builders:
    - DirectMazeBuilder: Plain parts tagged with a theme
    - FactoryMazeBuilder: Parts from a ComponentFactory (abstract factory)
    - MazeCreator subclasses: Parts from overridden factory methods
    - PrototypeMazeBuilder: Parts cloned from registered exemplars

Factory:
    - MazeBuilderFactory: Creates a builder from a strategy name and theme

Example:
    ```python
    from labyrinth.application.builders import MazeBuilderFactory

    builder = MazeBuilderFactory().create_builder("abstract_factory", "enchanted")
    builder.build_room(1)
    maze = builder.finish()
    ```
"""

from .abstract_factory import FactoryMazeBuilder
from .base import BaseMazeBuilder
from .direct import DirectMazeBuilder
from .factory import (
    ABSTRACT_FACTORY,
    DIRECT,
    FACTORY_METHOD,
    PROTOTYPE,
    STRATEGIES,
    MazeBuilderFactory,
    UnknownStrategyError,
)
from .factory_method import (
    ClassicMazeCreator,
    EnchantedMazeCreator,
    MazeCreator,
    ThemedMazeCreator,
)
from .prototype import PrototypeMazeBuilder

__all__ = [
    "ABSTRACT_FACTORY",
    "BaseMazeBuilder",
    "ClassicMazeCreator",
    "DIRECT",
    "DirectMazeBuilder",
    "EnchantedMazeCreator",
    "FACTORY_METHOD",
    "FactoryMazeBuilder",
    "MazeBuilderFactory",
    "MazeCreator",
    "PROTOTYPE",
    "PrototypeMazeBuilder",
    "STRATEGIES",
    "ThemedMazeCreator",
    "UnknownStrategyError",
]
