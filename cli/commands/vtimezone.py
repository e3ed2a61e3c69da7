"""Show the VTIMEZONE block for a timezone and event window."""

import logging

import typer
from typing_extensions import Annotated

from calshare.exceptions import CalendarError
from calshare.timezones.vtimezone import (
    build_observances,
    build_vtimezone,
    parse_instant,
)
from cli.context import get_context
from cli.display import console, render_observances

logger = logging.getLogger(__name__)


def vtimezone_command(
    timezone: Annotated[str, typer.Argument(help="IANA timezone identifier")],
    start: Annotated[str, typer.Option("--start", "-s", help="Event start datetime")],
    end: Annotated[str, typer.Option("--end", "-e", help="Event end datetime")],
    table: Annotated[
        bool, typer.Option("--table", help="Show observances as a table")
    ] = False,
) -> None:
    """Print the VTIMEZONE lines covering an event window."""
    ctx = get_context()
    provider = ctx.provider

    try:
        if table:
            zone = provider.tzinfo(timezone)
            blocks = build_observances(
                provider.lookup(timezone),
                zone,
                parse_instant(start, zone),
                parse_instant(end, zone),
            )
            render_observances(timezone, blocks)
            return

        lines = build_vtimezone(timezone, start, end, provider)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    except ValueError as e:
        logger.error(f"Invalid datetime: {e}")
        raise typer.Exit(1)

    if not lines:
        console.print("[dim]Floating event, no VTIMEZONE needed[/dim]")
        return

    console.print("\n".join(lines), markup=False, highlight=False, emoji=False)


# Alias for CLI registration
vtimezone = vtimezone_command
