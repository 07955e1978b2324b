"""Protocols establishing contracts between the maze layers."""

from labyrinth.contracts.protocols import (
    ComponentFactoryProtocol,
    MazeBuilderProtocol,
)

__all__ = [
    "ComponentFactoryProtocol",
    "MazeBuilderProtocol",
]
