"""Pydantic models for calendar sharing."""

from calshare.models.event import ShareEvent
from calshare.models.timezone import (
    ObservanceBlock,
    ObservanceKind,
    TimezoneTransitionTable,
)

__all__ = [
    "ShareEvent",
    "ObservanceBlock",
    "ObservanceKind",
    "TimezoneTransitionTable",
]
