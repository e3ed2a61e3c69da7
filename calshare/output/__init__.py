"""Output layer for calendar documents."""

from calshare.output.ics_composer import ICSComposer
from calshare.output.ics_writer import ICSWriter

__all__ = [
    "ICSComposer",
    "ICSWriter",
]
