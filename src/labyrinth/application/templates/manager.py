"""Bundled maze layouts.

Every ``data/*.json`` file shipped with this package is a template. The
files go through the same schema as user layouts, so listing, previewing
and initializing a template all work from a validated MazeLayoutConfig.
"""

import json
import logging
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from labyrinth.application.builders import MazeBuilderFactory
from labyrinth.application.config import (
    MazeLayoutConfig,
    config_to_plan,
    load_config_from_dict,
)
from labyrinth.application.director import MazeDirector
from labyrinth.domain.entities import Maze

logger = logging.getLogger(__name__)


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        super().__init__(f"Template not found: {name}")


@dataclass(frozen=True)
class LayoutTemplate:
    """A bundled layout and the validated configuration it holds."""

    name: str
    config: MazeLayoutConfig

    @property
    def summary(self) -> str:
        """e.g. 'enchanted via prototype: 4 rooms, 4 doors'."""
        return (
            f"{self.config.theme} via {self.config.strategy}: "
            f"{len(self.config.rooms)} rooms, {len(self.config.doors)} doors"
        )


class TemplateManager:
    """Lists, previews and copies the bundled maze layouts.

    Example:
        manager = TemplateManager()
        for template in manager.list_templates():
            print(f"{template.name}: {template.summary}")

        manager.init_template("corridor", Path("hall.json"), theme="enchanted")
    """

    def __init__(self) -> None:
        self._package = "labyrinth.application.templates"

    def _data_dir(self) -> Traversable:
        return resources.files(self._package).joinpath("data")

    def names(self) -> list[str]:
        """Template names, sorted."""
        return sorted(
            entry.name.removesuffix(".json")
            for entry in self._data_dir().iterdir()
            if entry.name.endswith(".json")
        )

    def template_exists(self, name: str) -> bool:
        return name in self.names()

    def get_template(self, name: str) -> str:
        """Raw JSON text of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if not self.template_exists(name):
            raise TemplateNotFoundError(name, self.names())
        return self._data_dir().joinpath(f"{name}.json").read_text(encoding="utf-8")

    def load(self, name: str) -> LayoutTemplate:
        """Parse and validate a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            ConfigError: If the bundled file does not match the layout schema.
        """
        data = json.loads(self.get_template(name))
        return LayoutTemplate(name=name, config=load_config_from_dict(data))

    def list_templates(self) -> list[LayoutTemplate]:
        return [self.load(name) for name in self.names()]

    def build(self, config: MazeLayoutConfig) -> Maze:
        """Construct the maze a layout describes with its own theme and strategy.

        Raises:
            MazeError: If the strategy cannot build the layout for the theme.
        """
        builder = MazeBuilderFactory().create_builder(config.strategy, config.theme)
        return MazeDirector().construct(builder, config_to_plan(config))

    def init_template(
        self,
        name: str,
        output_path: Path,
        theme: str | None = None,
        strategy: str | None = None,
    ) -> MazeLayoutConfig:
        """Write a template to ``output_path``, optionally retargeted.

        The resulting layout is validated and built once before anything is
        written, so a theme/strategy combination that cannot be constructed
        never reaches disk.

        Returns:
            The layout that was written.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            ConfigError: If the overrides do not match the layout schema.
            MazeError: If the layout cannot be built.
            OSError: If the file cannot be written.
        """
        data = self.load(name).config.model_dump(mode="json")
        if theme is not None:
            data["theme"] = theme
        if strategy is not None:
            data["strategy"] = strategy
        config = load_config_from_dict(data)
        self.build(config)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.info(f"Wrote template '{name}' to {output_path}")
        return config
