"""Pytest configuration and shared fixtures for maze tests."""

from __future__ import annotations

import pytest

from labyrinth.application import singleton
from labyrinth.application.singleton import MazeHandle
from labyrinth.domain import Maze


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def two_room_maze() -> Maze:
    """A classic maze with rooms 1 and 2 joined by a door."""
    maze = Maze(theme="classic")
    maze.add_room(1)
    maze.add_room(2)
    maze.add_door(1, 2)
    return maze


@pytest.fixture
def fresh_singleton(monkeypatch: pytest.MonkeyPatch) -> MazeHandle:
    """Swap the process-wide maze handle for an empty one.

    The module-level get_instance/reset functions use the returned handle
    for the duration of the test.
    """
    handle = MazeHandle()
    monkeypatch.setattr(singleton, "_default_handle", handle)
    return handle
