"""Format a transition table offset as an iCalendar UTC offset."""

import typer
from typing_extensions import Annotated

from calshare.timezones.vtimezone import minutes_to_offset_string


def offset_command(
    minutes: Annotated[
        int, typer.Argument(help="Table offset in minutes (positive west of UTC)")
    ],
) -> None:
    """Print the TZOFFSETFROM/TZOFFSETTO form of a table offset."""
    print(minutes_to_offset_string(minutes))


# Alias for CLI registration
offset = offset_command
