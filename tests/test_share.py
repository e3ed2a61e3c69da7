"""Tests for share URL building."""

import pytest

from calshare.constants import ShareSite
from calshare.exceptions import UnsupportedShareSiteError
from calshare.models.event import ShareEvent
from calshare.output.ics_composer import ICSComposer
from calshare.share import build_share_url, encode_component, prepare_event


@pytest.fixture
def event():
    return ShareEvent(
        title="Team sync & review",
        description="Agenda\nItems",
        location="Room 1",
        start_datetime="2024-06-01T10:00:00+00:00",
        end_datetime="2024-06-01T11:00:00+00:00",
        duration=1.5,
    )


def test_google_url(event):
    """Google links percent-encode free text and use Z dates."""
    assert build_share_url(event, ShareSite.GOOGLE) == (
        "https://calendar.google.com/calendar/render?action=TEMPLATE"
        "&dates=2024-06-01T10:00:00Z/2024-06-01T11:00:00Z"
        "&location=Room%201&text=Team%20sync%20%26%20review&details=Agenda%0AItems"
    )


def test_google_url_with_timezone(event):
    """A timezone adds the ctz parameter after the dates."""
    zoned = event.model_copy(update={"timezone": "Europe/Paris"})
    url = build_share_url(zoned, ShareSite.GOOGLE)

    assert "/2024-06-01T11:00:00Z&ctz=Europe/Paris&location=" in url


def test_yahoo_url(event):
    """Yahoo links carry the HHMM duration."""
    assert build_share_url(event, ShareSite.YAHOO) == (
        "https://calendar.yahoo.com/?v=60&view=d&type=20"
        "&title=Team%20sync%20%26%20review&st=2024-06-01T10:00:00Z&dur=0105"
        "&desc=Agenda%0AItems&in_loc=Room%201"
    )


def test_yahoo_url_without_duration(event):
    """A missing duration leaves dur empty."""
    url = build_share_url(event.model_copy(update={"duration": None}), "yahoo")

    assert "&dur=&desc=" in url


@pytest.mark.parametrize("site", [ShareSite.ICAL, ShareSite.OUTLOOK])
def test_file_sites_are_not_encoded(event, site):
    """File-based targets keep free text as written."""
    content = build_share_url(event, site)

    assert content.startswith("BEGIN:VCALENDAR")
    assert "SUMMARY:Team sync & review" in content
    assert "LOCATION:Room 1" in content
    assert "DESCRIPTION:Agenda\\nItems" in content
    assert "DTSTART:2024-06-01T10:00:00Z" in content


def test_file_site_uses_composer(event):
    """The given composer controls URL and delivery format."""
    composer = ICSComposer(is_mobile=lambda: True, source_url="https://example.com")
    result = build_share_url(event, ShareSite.ICAL, composer=composer)

    assert result.startswith("data:text/calendar;charset=utf8,")
    assert "URL:https://example.com" in result


def test_site_names_are_case_insensitive(event):
    """Site strings are matched case-insensitively."""
    assert build_share_url(event, "GOOGLE").startswith(
        "https://calendar.google.com/"
    )


def test_unsupported_site(event):
    """Unknown targets raise UnsupportedShareSiteError."""
    with pytest.raises(UnsupportedShareSiteError):
        build_share_url(event, "myspace")


def test_prepare_event_returns_copy(event):
    """Preparing for a site returns a copy."""
    prepared = prepare_event(event, ShareSite.GOOGLE)

    assert prepared.title == "Team%20sync%20%26%20review"
    assert event.title == "Team sync & review"


def test_encode_component_safe_characters():
    """encodeURIComponent leaves its unreserved marks alone."""
    assert encode_component("a-b_c.d!e~f*g'h(i)j") == "a-b_c.d!e~f*g'h(i)j"
    assert encode_component("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"
    assert encode_component("café") == "caf%C3%A9"
