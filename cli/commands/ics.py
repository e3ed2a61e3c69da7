"""Compose an ICS document for an event."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from calshare.exceptions import CalendarError
from calshare.models.event import ShareEvent
from calshare.output.ics_composer import ICSComposer
from calshare.output.ics_writer import ICSWriter
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def ics_command(
    title: Annotated[str, typer.Argument(help="Event title")],
    start: Annotated[str, typer.Option("--start", "-s", help="Event start datetime")],
    end: Annotated[str, typer.Option("--end", "-e", help="Event end datetime")],
    description: Annotated[str, typer.Option("--description", "-d")] = "",
    location: Annotated[str, typer.Option("--location", "-l")] = "",
    timezone: Annotated[str, typer.Option("--timezone", "-z", help="IANA timezone")] = "",
    url: Annotated[
        str | None,
        typer.Option("--url", help="Event page URL (default: CALSHARE_SOURCE_URL)"),
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write ICS file to this path")
    ] = None,
    mobile: Annotated[
        bool, typer.Option("--mobile", help="Print a data URI as served to mobile browsers")
    ] = False,
) -> None:
    """
    Print the ICS document for an event, or write it with --output.

    With --timezone the document includes a VTIMEZONE describing the
    offset changes around the event.
    """
    ctx = get_context()

    if mobile and output is not None:
        logger.error("--mobile and --output cannot be combined")
        raise typer.Exit(1)

    event = ShareEvent(
        title=title,
        description=description,
        location=location,
        start_datetime=start,
        end_datetime=end,
        timezone=timezone,
    )
    composer = ICSComposer(
        ctx.provider,
        is_mobile=lambda: mobile,
        source_url=url if url is not None else ctx.config.source_url,
    )

    try:
        content = composer.compose(event)
        if output is not None:
            ICSWriter().write(content, output)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    except ValueError as e:
        logger.error(f"Invalid datetime: {e}")
        raise typer.Exit(1)

    if output is not None:
        print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Wrote ICS")
        print(f"  {output.resolve()}")
        return

    console.print(
        content, soft_wrap=True, markup=False, highlight=False, emoji=False
    )


# Alias for CLI registration
ics = ics_command
