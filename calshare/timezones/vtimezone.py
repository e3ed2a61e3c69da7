"""VTIMEZONE generation from packed timezone transition tables."""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional, Union

from calshare.constants import OBSERVANCE_DATETIME_FORMAT
from calshare.exceptions import TransitionWindowError
from calshare.formatting import pad_zero
from calshare.models.timezone import (
    ObservanceBlock,
    ObservanceKind,
    TimezoneTransitionTable,
)
from calshare.timezones.provider import (
    PytzTransitionTableProvider,
    TransitionTableProvider,
)

logger = logging.getLogger(__name__)


def minutes_to_offset_string(minutes: int) -> str:
    """Convert table minutes to a signed ``HHMM`` UTC offset.

    Tables store offsets positive west of UTC, so the sign is reversed:
    -600 -> "+1000", 330 -> "-0530".
    """
    sign = "-" if minutes > 0 else "+"
    hours, mins = divmod(abs(minutes), 60)

    return f"{sign}{pad_zero(hours)}{pad_zero(mins)}"


def parse_instant(value: Union[str, datetime], zone: tzinfo) -> float:
    """Parse an event datetime to epoch seconds.

    Values without a UTC offset are read as wall-clock time in zone.
    Unparseable strings raise ValueError.
    """
    dt = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if dt.tzinfo is None:
        localize = getattr(zone, "localize", None)
        dt = localize(dt) if localize else dt.replace(tzinfo=zone)
    return dt.timestamp()


def _wall_clock(timestamp: float, zone: tzinfo) -> str:
    """Format an instant as local wall-clock time in zone."""
    local = datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone(zone)
    return local.strftime(OBSERVANCE_DATETIME_FORMAT)


def build_observances(
    table: TimezoneTransitionTable,
    zone: tzinfo,
    start_timestamp: float,
    end_timestamp: float,
) -> list[ObservanceBlock]:
    """Build the observance blocks covering an event window.

    Starts at the observance in force when the event starts and runs one
    boundary past the observance in force when the event ends. The window
    is cut off at the last table entry.

    Raises:
        TransitionWindowError: If the event starts in the table's first
            observance, which has no introducing transition
    """
    current_until = table.first_index_after(start_timestamp)
    future_until = table.first_index_after(end_timestamp) + 1

    if current_until <= 0:
        raise TransitionWindowError(
            f"Event starts before the first recorded transition of {table.name}"
        )

    last_index = future_until
    if last_index > len(table) - 1:
        logger.debug(
            f"Truncating {table.name} window at entry {len(table) - 1} "
            f"(requested {last_index})"
        )
        last_index = len(table) - 1

    blocks = []
    for i in range(current_until, last_index + 1):
        kind = ObservanceKind.DAYLIGHT if (i + 1) % 2 else ObservanceKind.STANDARD
        blocks.append(
            ObservanceBlock(
                kind=kind,
                starts_at=_wall_clock(table.untils[i - 1], zone),
                offset_from=minutes_to_offset_string(table.offsets[i - 1]),
                offset_to=minutes_to_offset_string(table.offsets[i]),
                tz_name=table.abbrs[i],
            )
        )

    return blocks


def build_vtimezone(
    timezone_id: str,
    start_datetime: Union[str, datetime],
    end_datetime: Union[str, datetime],
    provider: Optional[TransitionTableProvider] = None,
) -> list[str]:
    """Build VTIMEZONE lines for the transitions during and around an event.

    Only suitable for one-off events of bounded length; long-running or
    recurring events need recurrence rules instead.

    Args:
        timezone_id: IANA timezone identifier, or "" for a floating event
        start_datetime: Event start
        end_datetime: Event end
        provider: Transition table provider (defaults to pytz)

    Returns:
        Content lines from BEGIN:VTIMEZONE to END:VTIMEZONE, or an empty
        list for a floating event

    Raises:
        UnknownTimezoneError: If timezone_id is not recognised
        TransitionWindowError: If the event predates the zone's transitions
    """
    if timezone_id == "":
        return []

    provider = provider or PytzTransitionTableProvider()
    table = provider.lookup(timezone_id)
    zone = provider.tzinfo(timezone_id)

    blocks = build_observances(
        table,
        zone,
        parse_instant(start_datetime, zone),
        parse_instant(end_datetime, zone),
    )
    logger.debug(f"Built {len(blocks)} observance blocks for {timezone_id}")

    lines = ["BEGIN:VTIMEZONE", f"TZID:{timezone_id}"]
    for block in blocks:
        lines.extend(block.to_lines())
    lines.append("END:VTIMEZONE")
    return lines
