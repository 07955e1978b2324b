"""Director replaying a layout plan against any maze builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from labyrinth.contracts.protocols import MazeBuilderProtocol
    from labyrinth.domain.entities import Maze

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutPlan:
    """Ordered rooms and doors to build.

    Attributes:
        rooms: Room numbers, built in order.
        doors: Pairs of room numbers, built in order after all rooms.
    """

    rooms: tuple[int, ...]
    doors: tuple[tuple[int, int], ...] = ()


# Two rooms joined by a single door.
STANDARD_PLAN = LayoutPlan(rooms=(1, 2), doors=((1, 2),))


class MazeDirector:
    """Drives a builder through a layout plan.

    The director knows the order of construction steps but nothing about
    how parts are produced, so the same plan yields the same graph from
    every builder.

    Example:
        ```python
        director = MazeDirector()
        maze = director.construct(DirectMazeBuilder("classic"))
        ```
    """

    def construct(
        self,
        builder: "MazeBuilderProtocol",
        plan: LayoutPlan = STANDARD_PLAN,
    ) -> "Maze":
        """Build every room, then every door, then finish.

        Raises:
            MazeError: Any construction error from the builder, unchanged.
        """
        for number in plan.rooms:
            builder.build_room(number)
        for room_a, room_b in plan.doors:
            builder.build_door(room_a, room_b)
        maze = builder.finish()
        logger.info(
            f"Constructed {maze!r} with {type(builder).__name__}"
        )
        return maze

    def walk(self, maze: "Maze", plan: LayoutPlan = STANDARD_PLAN) -> None:
        """Enter the first planned room, then pass through each planned door.

        Raises:
            UnknownRoomError: If the plan names a room the maze lacks.
            UnknownDoorError: If the plan names a door the maze lacks.
        """
        if not plan.rooms:
            return
        maze.enter(plan.rooms[0])
        for room_a, room_b in plan.doors:
            maze.traverse(room_a, room_b)


__all__ = [
    "LayoutPlan",
    "MazeDirector",
    "STANDARD_PLAN",
]
