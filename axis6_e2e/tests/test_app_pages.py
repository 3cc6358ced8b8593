"""My Day, chat, analytics and achievements."""
import re
import secrets

import pytest
from playwright.async_api import expect

from axis6_e2e.pages import AchievementsPage, AnalyticsPage, ChatPage, MyDayPage, NewChatRoomPage

pytestmark = pytest.mark.asyncio


class TestMyDay:
    async def test_my_day_starts_on_today(self, authenticated_page):
        my_day = MyDayPage(authenticated_page.browser)
        await my_day.goto()
        await my_day.verify_loaded()

    async def test_day_navigation_round_trip(self, authenticated_page):
        my_day = MyDayPage(authenticated_page.browser)
        await my_day.goto()
        await my_day.verify_loaded()

        yesterday = await my_day.go_previous_day()
        assert yesterday != "Today"
        assert await my_day.go_next_day() == "Today"

    async def test_timer_opens_at_zero(self, authenticated_page):
        my_day = MyDayPage(authenticated_page.browser)
        await my_day.goto()
        await my_day.verify_loaded()

        await my_day.open_timer()
        await expect(my_day.timer_display).to_have_text("00:00:00")
        await my_day.close_timer()

    async def test_scheduler_requires_activity_name(self, authenticated_page):
        my_day = MyDayPage(authenticated_page.browser)
        await my_day.goto()
        await my_day.verify_loaded()

        modal = await my_day.open_scheduler()
        await expect(my_day.schedule_button).to_be_disabled()
        await modal.get_by_role("button", name="Cancel").click()
        await expect(my_day.scheduler_modal).to_be_hidden()

    @pytest.mark.mutates
    async def test_schedule_time_block(self, authenticated_page, screenshots):
        my_day = MyDayPage(authenticated_page.browser)
        await my_day.goto()
        await my_day.verify_loaded()

        activity = f"Playwright block {secrets.token_hex(3)}"
        await my_day.schedule_time_block(activity, start_time="07:30")
        await screenshots.capture("my-day-block-scheduled")


class TestChat:
    async def test_chat_loads(self, authenticated_page):
        chat = ChatPage(authenticated_page.browser)
        await chat.goto()
        await chat.verify_loaded()

    async def test_new_room_form(self, authenticated_page):
        new_room = NewChatRoomPage(authenticated_page.browser)
        await new_room.goto()
        await new_room.verify_loaded()

    @pytest.mark.mutates
    async def test_create_and_open_room(self, authenticated_page):
        new_room = NewChatRoomPage(authenticated_page.browser)
        await new_room.goto()
        await new_room.verify_loaded()

        name = f"Playwright room {secrets.token_hex(3)}"
        room_id = await new_room.create_room(name, description="Created by the browser suite")
        assert room_id
        await expect(new_room.page).to_have_url(re.compile(rf"/chat\?(?:.*&)?room={re.escape(room_id)}"))

        chat = ChatPage(authenticated_page.browser)
        await chat.verify_loaded()
        await chat.open_room(name)


class TestAnalytics:
    async def test_analytics_loads(self, authenticated_page):
        analytics = AnalyticsPage(authenticated_page.browser)
        await analytics.goto()
        await analytics.verify_loaded()
        await analytics.verify_overview()

    async def test_period_switch_keeps_overview(self, authenticated_page):
        analytics = AnalyticsPage(authenticated_page.browser)
        await analytics.goto()
        await analytics.verify_loaded()

        await analytics.select_period("30")
        await analytics.verify_overview()

    async def test_achievements_loads(self, authenticated_page):
        achievements = AchievementsPage(authenticated_page.browser)
        await achievements.goto()
        await achievements.verify_loaded()
