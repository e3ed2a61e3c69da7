"""Exception hierarchy for calendar sharing operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class UnknownTimezoneError(CalendarError):
    """Timezone identifier not present in the transition table provider."""

    pass


class TransitionWindowError(CalendarError):
    """Event window cannot be mapped onto the timezone's transition table.

    Raised when the event starts inside the first observance of the table,
    so there is no earlier transition to start an observance block from.
    """

    pass


class UnsupportedShareSiteError(CalendarError):
    """Share target not supported."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
