"""Application layer: construction strategies, director, singleton handle.

Public API:
    - MazeBuilderFactory: Create a builder by strategy name and theme
    - MazeDirector / LayoutPlan / STANDARD_PLAN: Replay a plan against a builder
    - MazeHandle / get_instance / reset: Process-wide maze handle
"""

from labyrinth.application.builders import (
    STRATEGIES,
    MazeBuilderFactory,
    UnknownStrategyError,
)
from labyrinth.application.director import STANDARD_PLAN, LayoutPlan, MazeDirector
from labyrinth.application.singleton import MazeHandle, get_instance, reset

__all__ = [
    "LayoutPlan",
    "MazeBuilderFactory",
    "MazeDirector",
    "MazeHandle",
    "STANDARD_PLAN",
    "STRATEGIES",
    "UnknownStrategyError",
    "get_instance",
    "reset",
]
