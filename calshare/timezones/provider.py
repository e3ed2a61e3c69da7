"""Timezone transition table providers."""

import logging
import math
from datetime import datetime, timezone, tzinfo
from typing import Protocol

import pytz

from calshare.exceptions import UnknownTimezoneError
from calshare.models.timezone import TimezoneTransitionTable

logger = logging.getLogger(__name__)

# Arbitrary instant used to read the offset of fixed-offset zones
_REFERENCE_INSTANT = datetime(2000, 1, 1)


class TransitionTableProvider(Protocol):
    """Protocol for transition table providers."""

    def lookup(self, timezone_id: str) -> TimezoneTransitionTable:
        """Return the transition table for timezone_id.

        Raises:
            UnknownTimezoneError: If the identifier is not recognised
        """
        ...

    def tzinfo(self, timezone_id: str) -> tzinfo:
        """Return a tzinfo for converting instants to local wall-clock time."""
        ...


def _to_timestamp(utc_naive: datetime) -> float:
    """Convert a naive UTC datetime to epoch seconds."""
    return utc_naive.replace(tzinfo=timezone.utc).timestamp()


def _to_minutes_west(offset) -> int:
    """Convert a utcoffset timedelta to minutes, positive west of UTC."""
    return -int(offset.total_seconds() // 60)


class PytzTransitionTableProvider:
    """Transition tables built from the zone data bundled with pytz.

    pytz compiles its zones with explicit transitions well into the future,
    so tables cover the years events are usually scheduled in.
    """

    def tzinfo(self, timezone_id: str) -> tzinfo:
        """Return the pytz zone for timezone_id."""
        try:
            return pytz.timezone(timezone_id)
        except pytz.UnknownTimeZoneError as e:
            raise UnknownTimezoneError(f"Unknown timezone: {timezone_id}") from e

    def lookup(self, timezone_id: str) -> TimezoneTransitionTable:
        """Build the transition table for timezone_id."""
        zone = self.tzinfo(timezone_id)

        transition_times = getattr(zone, "_utc_transition_times", None)
        if not transition_times:
            # Fixed-offset zone: a single observance with no boundaries
            offset = zone.utcoffset(_REFERENCE_INSTANT)
            table = TimezoneTransitionTable(
                name=timezone_id,
                untils=[math.inf],
                offsets=[_to_minutes_west(offset)],
                abbrs=[zone.tzname(_REFERENCE_INSTANT)],
            )
            logger.debug(f"Built fixed-offset table for {timezone_id}")
            return table

        # transition_times[0] is datetime.min, so period i ends where
        # period i + 1 begins
        untils = [_to_timestamp(t) for t in transition_times[1:]]
        untils.append(math.inf)

        offsets = []
        abbrs = []
        for utcoffset, _dst, tzname in zone._transition_info:
            offsets.append(_to_minutes_west(utcoffset))
            abbrs.append(tzname)

        table = TimezoneTransitionTable(
            name=timezone_id, untils=untils, offsets=offsets, abbrs=abbrs
        )
        logger.debug(f"Built table for {timezone_id} with {len(table)} entries")
        return table
