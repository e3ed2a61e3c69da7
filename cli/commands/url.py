"""Print an "add to calendar" link for a web calendar."""

import logging

import typer
from typing_extensions import Annotated

from calshare.constants import ShareSite
from calshare.exceptions import CalendarError
from calshare.models.event import ShareEvent
from calshare.share import build_share_url
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def url_command(
    title: Annotated[str, typer.Argument(help="Event title")],
    start: Annotated[str, typer.Option("--start", "-s", help="Event start datetime")],
    end: Annotated[str, typer.Option("--end", "-e", help="Event end datetime")],
    site: Annotated[
        ShareSite | None,
        typer.Option("--site", help="Share target (default: from CALSHARE_DEFAULT_SITE)"),
    ] = None,
    description: Annotated[str, typer.Option("--description", "-d")] = "",
    location: Annotated[str, typer.Option("--location", "-l")] = "",
    timezone: Annotated[str, typer.Option("--timezone", "-z", help="IANA timezone")] = "",
    duration: Annotated[
        str | None, typer.Option("--duration", help="Duration as HHMM (Yahoo)")
    ] = None,
) -> None:
    """
    Print a calendar link for Google or Yahoo.

    File-based targets (ical, outlook) are handled by the 'ics' command.
    """
    ctx = get_context()
    site = site or ctx.config.default_site

    if site.is_file_based:
        logger.error(f"'{site.value}' is file-based, use the 'ics' command instead")
        raise typer.Exit(1)

    event = ShareEvent(
        title=title,
        description=description,
        location=location,
        start_datetime=start,
        end_datetime=end,
        timezone=timezone,
        duration=duration,
    )

    try:
        link = build_share_url(event, site)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    logger.info(f"Built {site.value} link for '{title}'")
    console.print(
        link, soft_wrap=True, markup=False, highlight=False, emoji=False
    )


# Alias for CLI registration
url = url_command
