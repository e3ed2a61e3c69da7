"""String formatting helpers for calendar URLs and ICS content."""

import re
from typing import Optional, Union

_LINE_BREAK_RE = re.compile(r"(\r?\n|<br ?/?>)")


def format_date(date: Optional[str]) -> Optional[str]:
    """Rewrite an explicit ``+00:00`` offset to the ``Z`` designator.

    Falsy input is returned unchanged.
    """
    return date and date.replace("+00:00", "Z")


def format_duration(duration: Union[str, float, int]) -> str:
    """Encode a duration as ``HHMM`` for provider query parameters.

    Strings are assumed to be pre-formatted. Numbers are read as
    ``hours.minutes``, so ``1.5`` is one hour five minutes (``"0105"``).
    """
    if isinstance(duration, str):
        return duration

    parts = str(duration).split(".")
    if len(parts) < 2:
        parts.append("00")

    return "".join(part if len(part) == 2 else f"0{part}" for part in parts)


def escape_ics_description(description: str) -> str:
    """Replace line breaks and ``<br>`` markup with a literal ``\\n``."""
    return _LINE_BREAK_RE.sub(r"\\n", description)


def pad_zero(n: int) -> str:
    """Zero-pad the absolute value of n to two digits (5 -> "05")."""
    return f"{abs(int(n)):02d}"
