"""Shared constants for calendar sharing."""

from enum import Enum


class ShareSite(str, Enum):
    """Supported "add to calendar" targets."""

    GOOGLE = "google"
    YAHOO = "yahoo"
    ICAL = "ical"
    OUTLOOK = "outlook"

    @property
    def is_file_based(self) -> bool:
        """True if the target consumes an ICS document instead of a URL."""
        return self in (ShareSite.ICAL, ShareSite.OUTLOOK)


GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
YAHOO_CALENDAR_URL = "https://calendar.yahoo.com/"

# Local wall-clock format for VTIMEZONE observance DTSTART values
OBSERVANCE_DATETIME_FORMAT = "%Y%m%dT%H%M%S"

ICS_DATA_URI_PREFIX = "data:text/calendar;charset=utf8,"

# Characters left untouched by JavaScript's encodeURI / encodeURIComponent
URI_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"
URI_COMPONENT_SAFE_CHARS = "-_.!~*'()"

# Default output file
ICS_EXPORT_FILENAME = "event.ics"
