"""Display helpers for CLI output."""

from cli.display.console import console
from cli.display.observance_renderer import render_observances

__all__ = ["console", "render_observances"]
