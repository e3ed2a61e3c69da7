"""Build "add to calendar" links and files for share targets."""

import logging
from typing import Optional
from urllib.parse import quote

from calshare.constants import (
    GOOGLE_CALENDAR_URL,
    URI_COMPONENT_SAFE_CHARS,
    YAHOO_CALENDAR_URL,
    ShareSite,
)
from calshare.exceptions import UnsupportedShareSiteError
from calshare.formatting import format_date, format_duration
from calshare.models.event import ShareEvent
from calshare.output.ics_composer import ICSComposer

logger = logging.getLogger(__name__)


def encode_component(value: str) -> str:
    """Percent-encode value the way encodeURIComponent does."""
    return quote(value, safe=URI_COMPONENT_SAFE_CHARS)


def google_share_url(event: ShareEvent) -> str:
    """Return a Google Calendar event template URL."""
    ctz = f"&ctz={event.timezone}" if event.timezone else ""
    return (
        f"{GOOGLE_CALENDAR_URL}?action=TEMPLATE"
        f"&dates={event.start_datetime}/{event.end_datetime}{ctz}"
        f"&location={event.location}&text={event.title}&details={event.description}"
    )


def yahoo_share_url(event: ShareEvent) -> str:
    """Return a Yahoo Calendar event URL."""
    return (
        f"{YAHOO_CALENDAR_URL}?v=60&view=d&type=20&title={event.title}"
        f"&st={event.start_datetime}&dur={event.duration}"
        f"&desc={event.description}&in_loc={event.location}"
    )


def prepare_event(event: ShareEvent, site: ShareSite) -> ShareEvent:
    """Apply per-site encoding and formatting to an event's fields.

    Free text is percent-encoded except for file-based targets.
    """
    encode = not site.is_file_based

    def text(value: str) -> str:
        return encode_component(value) if encode else value

    duration = event.duration
    return event.model_copy(
        update={
            "title": text(event.title),
            "description": text(event.description),
            "location": text(event.location),
            "start_datetime": format_date(event.start_datetime),
            "end_datetime": format_date(event.end_datetime),
            "duration": format_duration(duration) if duration is not None else "",
        }
    )


def build_share_url(
    event: ShareEvent,
    site: ShareSite | str,
    composer: Optional[ICSComposer] = None,
) -> str:
    """Return a calendar URL, or ICS content for file-based targets.

    Args:
        event: Event to share
        site: Share target
        composer: ICS composer used for iCal/Outlook (defaults to a
            desktop composer with no source URL)

    Raises:
        UnsupportedShareSiteError: If site is not a known target
        UnknownTimezoneError: If the event timezone is not recognised
    """
    try:
        site = ShareSite(site.lower())
    except ValueError as e:
        raise UnsupportedShareSiteError(f"Unsupported share site: {site}") from e

    data = prepare_event(event, site)
    logger.debug(f"Building {site.value} share for '{event.title}'")

    if site == ShareSite.GOOGLE:
        return google_share_url(data)
    if site == ShareSite.YAHOO:
        return yahoo_share_url(data)

    composer = composer or ICSComposer()
    return composer.compose(data)
