"""`labyrinth templates` command group: list, show and init bundled layouts."""

from pathlib import Path
from typing import Annotated

import typer

from labyrinth.application.config import ConfigError
from labyrinth.application.templates import TemplateManager, TemplateNotFoundError
from labyrinth.domain.errors import MazeError

templates_app = typer.Typer(
    name="templates",
    help="Inspect bundled maze layouts and copy them into layout files.",
)


def _not_found(error: TemplateNotFoundError) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    typer.echo(f"Available templates: {', '.join(error.available)}", err=True)
    return typer.Exit(code=1)


@templates_app.command(name="list")
def list_templates() -> None:
    """List bundled layouts with their theme, strategy and size."""
    templates = TemplateManager().list_templates()

    typer.echo("Available templates:")
    width = max((len(t.name) for t in templates), default=0)
    for template in templates:
        typer.echo(f"  {template.name:<{width}}  {template.summary}")


@templates_app.command(name="show")
def show_template(
    name: Annotated[str, typer.Argument(help="Template to build and describe")],
) -> None:
    """Build a bundled layout and print the resulting maze.

    Example:
        labyrinth templates show enchanted-ring
    """
    manager = TemplateManager()
    try:
        template = manager.load(name)
    except TemplateNotFoundError as e:
        raise _not_found(e)
    typer.echo(f"{template.name}: {template.summary}")
    typer.echo(manager.build(template.config).describe())


@templates_app.command(name="init")
def init_template(
    name: Annotated[str, typer.Argument(help="Template to copy")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    theme: Annotated[
        str | None,
        typer.Option("--theme", "-t", help="Replace the template's theme"),
    ] = None,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-s", help="Replace the template's strategy"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Write a bundled layout to a file, optionally with another theme or strategy.

    The layout is built once first; nothing is written if it cannot be.

    Examples:
        labyrinth templates init corridor
        labyrinth templates init corridor --theme enchanted --strategy prototype -o hall.json
    """
    if output is None:
        output = Path(f"{name}.json")

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        config = TemplateManager().init_template(
            name, output, theme=theme, strategy=strategy
        )
    except TemplateNotFoundError as e:
        raise _not_found(e)
    except (ConfigError, MazeError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output} ({config.theme} via {config.strategy})")
