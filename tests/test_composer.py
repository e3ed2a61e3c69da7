"""Tests for ICS document composition."""

from urllib.parse import unquote

import pytest
from icalendar import Calendar as ICalendar

from calshare.exceptions import UnknownTimezoneError
from calshare.models.event import ShareEvent
from calshare.output.ics_composer import ICSComposer


@pytest.fixture
def floating_event():
    return ShareEvent(
        title="Team sync",
        description="Agenda:\r\nDemo<br>Retro",
        location="Room 4",
        start_datetime="20240601T100000Z",
        end_datetime="20240601T110000Z",
    )


@pytest.fixture
def zoned_event():
    return ShareEvent(
        title="Team sync",
        description="Agenda",
        location="Room 4",
        start_datetime="20240601T060000",
        end_datetime="20240601T070000",
        timezone="America/New_York",
    )


def test_floating_event_document(floating_event):
    """A floating event has no VTIMEZONE and plain DTSTART/DTEND."""
    composer = ICSComposer(source_url="https://example.com/event")

    assert composer.compose(floating_event).split("\n") == [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "BEGIN:VEVENT",
        "URL:https://example.com/event",
        "METHOD:PUBLISH",
        "DTSTART:20240601T100000Z",
        "DTEND:20240601T110000Z",
        "SUMMARY:Team sync",
        "DESCRIPTION:Agenda:\\nDemo\\nRetro",
        "LOCATION:Room 4",
        "END:VEVENT",
        "END:VCALENDAR",
    ]


def test_zoned_event_document(zoned_event, provider):
    """A zoned event embeds the VTIMEZONE before the VEVENT."""
    lines = ICSComposer(provider).content_lines(zoned_event)

    assert lines[:4] == [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "BEGIN:VTIMEZONE",
        "TZID:America/New_York",
    ]
    vevent = lines[lines.index("BEGIN:VEVENT") :]
    assert lines.index("END:VTIMEZONE") < lines.index("BEGIN:VEVENT")
    assert "DTSTART;TZID=America/New_York:20240601T060000" in vevent
    assert "DTEND;TZID=America/New_York:20240601T070000" in vevent
    assert vevent[-1] == "END:VCALENDAR"


def test_composed_document_parses(zoned_event, provider):
    """icalendar can read the composed document back."""
    content = ICSComposer(provider, source_url="https://example.com").compose(
        zoned_event
    )
    cal = ICalendar.from_ical(content)

    events = list(cal.walk("VEVENT"))
    assert len(events) == 1
    assert str(events[0]["SUMMARY"]) == "Team sync"
    assert len(list(cal.walk("VTIMEZONE"))) == 1


def test_mobile_returns_data_uri(floating_event):
    """On mobile the document is returned as an encoded data URI."""
    composer = ICSComposer(is_mobile=lambda: True)
    result = composer.compose(floating_event)

    assert result.startswith(
        "data:text/calendar;charset=utf8,BEGIN:VCALENDAR%0AVERSION:2.0%0A"
    )
    assert "\n" not in result
    assert " " not in result
    desktop = ICSComposer().compose(floating_event)
    assert unquote(result) == f"data:text/calendar;charset=utf8,{desktop}"


def test_mobile_predicate_queried_per_compose(floating_event):
    """The predicate is read at compose time."""
    calls = []

    def is_mobile():
        calls.append(True)
        return False

    composer = ICSComposer(is_mobile=is_mobile)
    composer.compose(floating_event)
    composer.compose(floating_event)

    assert len(calls) == 2


def test_unknown_timezone_propagates(provider):
    """Unknown event timezones are surfaced to the caller."""
    event = ShareEvent(
        start_datetime="20240601T060000",
        end_datetime="20240601T070000",
        timezone="Nowhere/Special",
    )
    with pytest.raises(UnknownTimezoneError):
        ICSComposer(provider).compose(event)


@pytest.mark.parametrize("zone_id", ["UTC", "Etc/UTC", "Etc/GMT+5"])
def test_single_observance_zone_omits_vtimezone(provider, zone_id):
    """Zones without transitions keep the TZID but carry no VTIMEZONE."""
    event = ShareEvent(
        title="Standup",
        start_datetime="20240601T100000",
        end_datetime="20240601T110000",
        timezone=zone_id,
    )
    lines = ICSComposer(provider).content_lines(event)

    assert "BEGIN:VTIMEZONE" not in lines
    assert f"DTSTART;TZID={zone_id}:20240601T100000" in lines
    assert f"DTEND;TZID={zone_id}:20240601T110000" in lines
    assert lines[2] == "BEGIN:VEVENT"
