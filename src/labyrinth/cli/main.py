"""Typer CLI for building and inspecting mazes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from labyrinth.application import (
    STANDARD_PLAN,
    STRATEGIES,
    MazeBuilderFactory,
    MazeDirector,
)
from labyrinth.application import singleton
from labyrinth.application.config import ConfigError, config_to_plan, load_config
from labyrinth.cli.commands import templates_app
from labyrinth.domain import CLASSIC, EventKind, MazeError, MazeEvent
from labyrinth.domain.components import factory_registry

app = typer.Typer(
    name="labyrinth",
    help="Build mazes of rooms and doors with interchangeable construction strategies.",
)

app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log construction steps to stderr"),
    ] = False,
) -> None:
    """Build mazes of rooms and doors."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _echo_event(event: MazeEvent) -> None:
    if event.kind is EventKind.DOOR_OPENED and event.door is not None:
        typer.echo(f"  opened door {event.door[0]}-{event.door[1]}")
    else:
        typer.echo(f"  entered room {event.room}")


@app.command()
def build(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON layout file"),
    ] = None,
    theme: Annotated[
        str | None,
        typer.Option("--theme", "-t", help="Component family, e.g. classic or enchanted"),
    ] = None,
    strategy: Annotated[
        str | None,
        typer.Option(
            "--strategy",
            "-s",
            help="Construction strategy: direct, abstract_factory, factory_method, prototype",
        ),
    ] = None,
    walk: Annotated[
        bool,
        typer.Option("--walk", help="Walk through every door after building"),
    ] = False,
) -> None:
    """Build a maze and print its rooms and doors.

    Without --config the standard two-room layout is built. Command-line
    --theme and --strategy override the values from the layout file.

    Examples:
        labyrinth build --theme enchanted --strategy prototype
        labyrinth build --config ring.json --walk
    """
    plan = STANDARD_PLAN
    chosen_theme = CLASSIC
    chosen_strategy = "direct"

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        plan = config_to_plan(config)
        chosen_theme = config.theme
        chosen_strategy = config.strategy

    if theme is not None:
        chosen_theme = theme
    if strategy is not None:
        chosen_strategy = strategy

    director = MazeDirector()
    try:
        builder = MazeBuilderFactory().create_builder(chosen_strategy, chosen_theme)
        maze = director.construct(builder, plan)
    except (MazeError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(maze.describe())

    if walk:
        typer.echo()
        typer.echo("Walk:")
        maze.subscribe(_echo_event)
        try:
            director.walk(maze, plan)
        except MazeError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        finally:
            maze.unsubscribe(_echo_event)


@app.command()
def themes() -> None:
    """List the registered component families."""
    typer.echo("Registered themes:")
    for name in factory_registry.list():
        typer.echo(f"  {name}")
    typer.echo()
    typer.echo("Any other theme name is accepted and only tags the components.")


@app.command()
def strategies() -> None:
    """List the available construction strategies."""
    typer.echo("Available strategies:")
    for name in STRATEGIES:
        typer.echo(f"  {name}")


@app.command(name="singleton")
def singleton_command(
    theme: Annotated[
        str,
        typer.Option("--theme", "-t", help="Theme requested from the shared maze"),
    ] = CLASSIC,
    reset_theme: Annotated[
        str | None,
        typer.Option("--reset-theme", help="Reset the shared maze to this theme afterwards"),
    ] = None,
) -> None:
    """Show how the shared maze keeps its first theme until reset.

    Examples:
        labyrinth singleton --theme classic --reset-theme enchanted
    """
    first = singleton.get_instance(theme)
    typer.echo(f"Shared maze: {first.theme}")

    other = "enchanted" if theme != "enchanted" else CLASSIC
    second = singleton.get_instance(other)
    same = "same" if second is first else "new"
    typer.echo(f"Requested '{other}': got {same} instance ({second.theme})")

    if reset_theme is not None:
        fresh = singleton.reset(reset_theme)
        typer.echo(f"Reset to '{reset_theme}': shared maze is now {fresh.theme}")


if __name__ == "__main__":
    app()
