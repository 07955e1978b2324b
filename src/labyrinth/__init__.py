"""Maze component graph with interchangeable construction strategies."""

__version__ = "0.1.0"
