"""Compose iCalendar text for a single shared event."""

import logging
from typing import Callable, Optional
from urllib.parse import quote

from calshare.constants import ICS_DATA_URI_PREFIX, URI_SAFE_CHARS
from calshare.exceptions import TransitionWindowError
from calshare.formatting import escape_ics_description
from calshare.models.event import ShareEvent
from calshare.timezones.provider import (
    PytzTransitionTableProvider,
    TransitionTableProvider,
)
from calshare.timezones.vtimezone import build_vtimezone

logger = logging.getLogger(__name__)


def _never_mobile() -> bool:
    return False


class ICSComposer:
    """Builds the VCALENDAR document for one event.

    The mobile check and the page URL are injected so the composer never
    reads ambient state.
    """

    def __init__(
        self,
        provider: Optional[TransitionTableProvider] = None,
        is_mobile: Callable[[], bool] = _never_mobile,
        source_url: str = "",
    ):
        """
        Initialize ICSComposer.

        Args:
            provider: Transition table provider for VTIMEZONE generation
            is_mobile: Predicate deciding whether to return a data URI
            source_url: Value for the VEVENT URL property
        """
        self.provider = provider or PytzTransitionTableProvider()
        self.is_mobile = is_mobile
        self.source_url = source_url

    def content_lines(self, event: ShareEvent) -> list[str]:
        """Return the document as a list of content lines."""
        timezone = event.timezone
        try:
            vtimezone = build_vtimezone(
                timezone, event.start_datetime, event.end_datetime, self.provider
            )
        except TransitionWindowError as e:
            # DTSTART keeps its TZID, clients resolve the zone themselves
            logger.debug(f"Omitting VTIMEZONE for {timezone}: {e}")
            vtimezone = []

        if timezone == "":
            dtstart = f"DTSTART:{event.start_datetime}"
            dtend = f"DTEND:{event.end_datetime}"
        else:
            dtstart = f"DTSTART;TZID={timezone}:{event.start_datetime}"
            dtend = f"DTEND;TZID={timezone}:{event.end_datetime}"

        return [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            *vtimezone,
            "BEGIN:VEVENT",
            f"URL:{self.source_url}",
            "METHOD:PUBLISH",
            dtstart,
            dtend,
            f"SUMMARY:{event.title}",
            f"DESCRIPTION:{escape_ics_description(event.description)}",
            f"LOCATION:{event.location}",
            "END:VEVENT",
            "END:VCALENDAR",
        ]

    def compose(self, event: ShareEvent) -> str:
        """Return ICS text, or a percent-encoded data URI on mobile."""
        content = "\n".join(self.content_lines(event))

        if self.is_mobile():
            logger.debug("Mobile context, returning ICS as data URI")
            return quote(f"{ICS_DATA_URI_PREFIX}{content}", safe=URI_SAFE_CHARS)
        return content
