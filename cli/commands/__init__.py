"""CLI commands package."""

from cli.commands.ics import ics_command
from cli.commands.offset import offset_command
from cli.commands.url import url_command
from cli.commands.vtimezone import vtimezone_command

__all__ = [
    "ics_command",
    "offset_command",
    "url_command",
    "vtimezone_command",
]
