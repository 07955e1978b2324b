"""Unit tests for the process-wide maze handle."""

from __future__ import annotations

import threading

from labyrinth.application import singleton
from labyrinth.application.singleton import MazeHandle


class TestMazeHandle:
    """Test suite for MazeHandle."""

    def test_starts_absent(self) -> None:
        handle = MazeHandle()

        assert handle.current() is None
        assert handle.theme is None

    def test_first_call_creates_maze_with_theme(self) -> None:
        handle = MazeHandle()

        maze = handle.get_instance("classic")

        assert maze.theme == "classic"
        assert handle.current() is maze

    def test_later_calls_ignore_theme(self) -> None:
        handle = MazeHandle()
        first = handle.get_instance("classic")

        second = handle.get_instance("enchanted")

        assert second is first
        assert second.theme == "classic"

    def test_reset_replaces_instance(self) -> None:
        handle = MazeHandle()
        old = handle.get_instance("classic")
        old.add_room(1)

        fresh = handle.reset("enchanted")

        assert fresh is not old
        assert fresh.theme == "enchanted"
        assert handle.get_instance("anything") is fresh
        assert len(fresh) == 0
        assert old.theme == "classic"
        assert len(old) == 1

    def test_reset_from_absent(self) -> None:
        handle = MazeHandle()

        maze = handle.reset("enchanted")

        assert handle.get_instance("classic") is maze

    def test_concurrent_first_calls_share_one_instance(self) -> None:
        handle = MazeHandle()
        barrier = threading.Barrier(16)
        results = []
        results_lock = threading.Lock()

        def worker(theme: str) -> None:
            barrier.wait()
            maze = handle.get_instance(theme)
            with results_lock:
                results.append(maze)

        threads = [
            threading.Thread(target=worker, args=(f"theme{i}",)) for i in range(16)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 16
        assert all(maze is results[0] for maze in results)


class TestModuleLevelAccess:
    """Tests for the module-level get_instance/reset functions."""

    def test_get_instance_and_reset(self, fresh_singleton: MazeHandle) -> None:
        first = singleton.get_instance("classic")

        assert singleton.get_instance("enchanted") is first
        assert singleton.current() is first
        assert singleton.get_handle() is fresh_singleton

        fresh = singleton.reset("enchanted")

        assert fresh is not first
        assert singleton.get_instance("classic") is fresh
        assert fresh.theme == "enchanted"
