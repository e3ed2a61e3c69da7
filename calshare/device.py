"""User agent checks used to pick the ICS delivery format."""

import re
from typing import Optional

_MOBILE_RE = re.compile(r"Mobile|iP(hone|od|ad)|Android|BlackBerry|IEMobile")
_IE_RE = re.compile(r"MSIE|Trident")


def is_mobile_user_agent(user_agent: Optional[str]) -> bool:
    """True if the user agent belongs to a known mobile browser."""
    return bool(user_agent) and _MOBILE_RE.search(user_agent) is not None


def is_internet_explorer(user_agent: Optional[str]) -> bool:
    """True if the user agent is Internet Explorer."""
    return bool(user_agent) and _IE_RE.search(user_agent) is not None
