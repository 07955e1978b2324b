"""CLI command groups."""

from .templates import templates_app

__all__ = ["templates_app"]
