"""Bundled maze layout templates."""

from .manager import LayoutTemplate, TemplateManager, TemplateNotFoundError

__all__ = [
    "LayoutTemplate",
    "TemplateManager",
    "TemplateNotFoundError",
]
