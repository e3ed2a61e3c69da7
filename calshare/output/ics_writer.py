"""ICS file writer for composed share documents."""

import logging
from pathlib import Path

from icalendar import Calendar

from calshare.exceptions import ExportError

logger = logging.getLogger(__name__)


class ICSWriter:
    """Writer for composed ICS documents."""

    def validate(self, content: str) -> Calendar:
        """Parse content with icalendar.

        Raises:
            ExportError: If the content is not a parseable calendar
        """
        try:
            return Calendar.from_ical(content)
        except ValueError as e:
            raise ExportError(f"Composed calendar is not valid iCalendar: {e}") from e

    def write(self, content: str, path: Path) -> None:
        """Write ICS content to a file path.

        Args:
            content: ICS text (not a data URI)
            path: Path to write ICS file

        Raises:
            ExportError: If the content is invalid or the file ends up empty
        """
        if not content:
            raise ExportError("Refusing to write empty calendar content")

        calendar = self.validate(content)
        logger.debug(
            f"Validated calendar with {len(calendar.subcomponents)} components"
        )

        try:
            # Content lines are CRLF-terminated on disk
            path.write_bytes("\r\n".join(content.split("\n")).encode("utf-8") + b"\r\n")

            # Verify file was written
            if path.stat().st_size == 0:
                raise ExportError(f"File was created but is empty: {path}")
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

        logger.info(f"Wrote calendar to {path}")

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
