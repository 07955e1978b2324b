"""Component families and exemplars for maze construction.

- ThemedComponentFactory: Factory binding one theme to rooms and doors
- ClassicComponentFactory / EnchantedComponentFactory: Built-in families
- get_component_factory: Select a factory by theme identifier
- FactoryRegistry / factory_registry: Singleton registry of families
- PrototypeRegistry: Named exemplars cloned on demand
- default_prototype_registry: Registry seeded with the built-in exemplars
"""

from .factory import (
    ClassicComponentFactory,
    EnchantedComponentFactory,
    ThemedComponentFactory,
    get_component_factory,
)
from .prototype import Exemplar, PrototypeRegistry, default_prototype_registry
from .registry import FactoryRegistry, factory_registry

__all__ = [
    "ClassicComponentFactory",
    "EnchantedComponentFactory",
    "Exemplar",
    "FactoryRegistry",
    "PrototypeRegistry",
    "ThemedComponentFactory",
    "default_prototype_registry",
    "factory_registry",
    "get_component_factory",
]
