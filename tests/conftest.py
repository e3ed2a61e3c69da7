import math
from datetime import timezone

import pytest

from calshare import create_app
from calshare.config import ShareConfig
from calshare.exceptions import UnknownTimezoneError
from calshare.models.timezone import TimezoneTransitionTable
from calshare.timezones.provider import PytzTransitionTableProvider


class StaticTableProvider:
    """Provider serving a fixed table with UTC wall-clock conversion."""

    def __init__(self, table: TimezoneTransitionTable):
        self.table = table

    def lookup(self, timezone_id: str) -> TimezoneTransitionTable:
        if timezone_id != self.table.name:
            raise UnknownTimezoneError(f"Unknown timezone: {timezone_id}")
        return self.table

    def tzinfo(self, timezone_id: str):
        self.lookup(timezone_id)
        return timezone.utc


@pytest.fixture
def fixed_table():
    """Alternating table with boundaries every 1000 seconds."""
    return TimezoneTransitionTable(
        name="Test/Zone",
        untils=[1000, 2000, 3000, 4000, 5000, math.inf],
        offsets=[300, 240, 300, 240, 300, 240],
        abbrs=["EST", "EDT", "EST", "EDT", "EST", "EDT"],
    )


@pytest.fixture
def static_provider(fixed_table):
    return StaticTableProvider(fixed_table)


@pytest.fixture
def provider():
    return PytzTransitionTableProvider()


@pytest.fixture
def app():
    """Create and configure a Flask app for testing."""
    app = create_app(ShareConfig(source_url="https://example.com/event"))
    return app
