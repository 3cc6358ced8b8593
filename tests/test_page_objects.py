"""Page-object helpers that work without a browser."""

from __future__ import annotations

import pytest

from axis6_e2e.pages.analytics import PERIODS, AnalyticsPage
from axis6_e2e.pages.chat import ROOM_URL_RE
from axis6_e2e.pages.my_day import TIMER_DISPLAY_RE


class _NoPageBrowser:
    @property
    def page(self):
        raise AssertionError("page must not be touched")


@pytest.mark.parametrize(
    "url",
    [
        "https://axis6.app/chat?room=5f2c0c7e-1d2a-4b8e-9a57-0c1f4b0e2a11",
        "http://localhost:6789/chat?tab=all&room=42",
    ],
)
def test_room_redirect_urls_match(url):
    assert ROOM_URL_RE.search(url)


@pytest.mark.parametrize("url", ["https://axis6.app/chat", "https://axis6.app/chat/new", "https://axis6.app/chat?room="])
def test_non_room_urls_do_not_match(url):
    assert not ROOM_URL_RE.search(url)


def test_timer_display_format():
    assert TIMER_DISPLAY_RE.match("00:00:00")
    assert TIMER_DISPLAY_RE.match("01:23:45")
    assert not TIMER_DISPLAY_RE.match("Start Timer 00:00:00")


@pytest.mark.asyncio
async def test_unknown_analytics_period_is_rejected_before_touching_the_page():
    analytics = AnalyticsPage(_NoPageBrowser())
    with pytest.raises(ValueError, match="period must be one of"):
        await analytics.select_period("14")


def test_periods_match_select_options():
    assert PERIODS == ("7", "30", "90", "365")
