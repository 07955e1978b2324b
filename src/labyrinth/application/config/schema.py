"""Pydantic models for maze layout files.

A layout file names a theme, a construction strategy and the rooms and
doors to build:

    {
        "schema_version": "1.0",
        "theme": "enchanted",
        "strategy": "prototype",
        "rooms": [1, 2, 3],
        "doors": [{"between": [1, 2]}, {"between": [2, 3]}]
    }
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

StrategyName = Literal["direct", "abstract_factory", "factory_method", "prototype"]


class DoorConfig(BaseModel):
    """A door joining two rooms.

    Attributes:
        between: The two room numbers, in any order. Must differ.
    """

    model_config = ConfigDict(extra="forbid")

    between: tuple[int, int]

    @field_validator("between")
    @classmethod
    def validate_distinct_rooms(cls, v: tuple[int, int]) -> tuple[int, int]:
        if v[0] == v[1]:
            raise ValueError(f"a door cannot connect room {v[0]} to itself")
        return v


class MazeLayoutConfig(BaseModel):
    """Root layout configuration.

    Attributes:
        schema_version: Layout file format version.
        theme: Component family tag for every room and door.
        strategy: Construction strategy used to build the maze.
        rooms: Room numbers to build (1 to 500, unique, non-negative).
        doors: Doors to build; endpoints must appear in ``rooms``.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    theme: str = Field(default="classic", min_length=1)
    strategy: StrategyName = "direct"
    rooms: list[int] = Field(..., min_length=1, max_length=500)
    doors: list[DoorConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @field_validator("theme")
    @classmethod
    def validate_theme_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("theme must not be blank")
        return v

    @field_validator("rooms")
    @classmethod
    def validate_rooms(cls, v: list[int]) -> list[int]:
        negative = [n for n in v if n < 0]
        if negative:
            raise ValueError(f"room numbers must be non-negative, got {negative}")
        duplicates = sorted({n for n in v if v.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate room numbers: {duplicates}")
        return v

    @model_validator(mode="after")
    def validate_door_endpoints(self) -> "MazeLayoutConfig":
        rooms = set(self.rooms)
        pairs: set[frozenset[int]] = set()
        for door in self.doors:
            missing = [n for n in door.between if n not in rooms]
            if missing:
                raise ValueError(
                    f"door {list(door.between)} references unknown rooms {missing}"
                )
            pair = frozenset(door.between)
            if pair in pairs:
                raise ValueError(f"duplicate door between rooms {list(door.between)}")
            pairs.add(pair)
        return self
