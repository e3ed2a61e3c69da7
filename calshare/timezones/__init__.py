"""Timezone transition tables and VTIMEZONE generation."""

from calshare.timezones.provider import (
    PytzTransitionTableProvider,
    TransitionTableProvider,
)
from calshare.timezones.vtimezone import (
    build_observances,
    build_vtimezone,
    minutes_to_offset_string,
)

__all__ = [
    "PytzTransitionTableProvider",
    "TransitionTableProvider",
    "build_observances",
    "build_vtimezone",
    "minutes_to_offset_string",
]
