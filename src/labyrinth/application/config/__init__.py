"""Layout file schema and loading.

Public API:
    - MazeLayoutConfig: Root layout model
    - DoorConfig: Door model
    - load_config: Load a layout from a JSON file
    - load_config_from_dict: Validate an already-parsed layout
    - config_to_plan: Convert a layout to a director LayoutPlan
    - ConfigError: Exception for layout errors

Example:
    >>> from pathlib import Path
    >>> from labyrinth.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("ring.json"))
    ...     print(f"{len(config.rooms)} rooms, theme {config.theme}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from labyrinth.application.config.adapter import config_to_plan
from labyrinth.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from labyrinth.application.config.schema import (
    SUPPORTED_VERSIONS,
    DoorConfig,
    MazeLayoutConfig,
)

__all__ = [
    "ConfigError",
    "DoorConfig",
    "MazeLayoutConfig",
    "SUPPORTED_VERSIONS",
    "config_to_plan",
    "load_config",
    "load_config_from_dict",
]
