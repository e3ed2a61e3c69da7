"""Timezone transition table and VTIMEZONE observance models."""

from enum import Enum

from pydantic import BaseModel, model_validator


class ObservanceKind(str, Enum):
    """VTIMEZONE sub-component kind."""

    DAYLIGHT = "DAYLIGHT"
    STANDARD = "STANDARD"


class TimezoneTransitionTable(BaseModel):
    """Packed transition table for one timezone.

    Entry ``i`` describes the observance in force until ``untils[i]``
    (epoch seconds). ``offsets`` are minutes, positive west of UTC. The last
    ``untils`` entry is ``math.inf``.
    """

    name: str
    untils: list[float]
    offsets: list[int]
    abbrs: list[str]

    @model_validator(mode="after")
    def validate_table(self):
        """Validate parallel sequence lengths and boundary ordering."""
        if not (len(self.untils) == len(self.offsets) == len(self.abbrs)):
            raise ValueError("untils, offsets and abbrs must have equal length")
        if not self.untils:
            raise ValueError("transition table must contain at least one entry")
        for previous, current in zip(self.untils, self.untils[1:]):
            if current < previous:
                raise ValueError("untils must be non-decreasing")
        return self

    def __len__(self) -> int:
        return len(self.untils)

    def first_index_after(self, timestamp: float) -> int:
        """Index of the first boundary strictly greater than timestamp, or -1."""
        for index, until in enumerate(self.untils):
            if until > timestamp:
                return index
        return -1


class ObservanceBlock(BaseModel):
    """One DAYLIGHT/STANDARD sub-component of a VTIMEZONE."""

    kind: ObservanceKind
    starts_at: str
    offset_from: str
    offset_to: str
    tz_name: str

    def to_lines(self) -> list[str]:
        """Render the block as iCalendar content lines."""
        return [
            f"BEGIN:{self.kind.value}",
            f"DTSTART:{self.starts_at}",
            f"TZOFFSETFROM:{self.offset_from}",
            f"TZOFFSETTO:{self.offset_to}",
            f"TZNAME:{self.tz_name}",
            f"END:{self.kind.value}",
        ]
