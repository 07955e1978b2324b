"""Conversion from validated layout configuration to a director plan."""

from labyrinth.application.config.schema import MazeLayoutConfig
from labyrinth.application.director import LayoutPlan


def config_to_plan(config: MazeLayoutConfig) -> LayoutPlan:
    """Convert a layout configuration into a LayoutPlan, preserving order."""
    return LayoutPlan(
        rooms=tuple(config.rooms),
        doors=tuple((door.between[0], door.between[1]) for door in config.doors),
    )
