from __future__ import annotations

import re
from typing import Optional

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage

TIMER_DISPLAY_RE = re.compile(r"^\d{2}:\d{2}:\d{2}$")


class MyDayPage(BasePage):
    """Day timeline with the time block scheduler and activity timer modals."""

    PATH = "/my-day"

    @property
    def previous_day_button(self) -> Locator:
        return self.page.get_by_role("button", name="Previous day")

    @property
    def next_day_button(self) -> Locator:
        return self.page.get_by_role("button", name="Next day")

    @property
    def add_block_button(self) -> Locator:
        return self.page.get_by_role("button", name="Add Block")

    @property
    def start_timer_button(self) -> Locator:
        return self.page.get_by_role("button", name="Start Timer")

    def _modal(self, title: str) -> Locator:
        return self.page.locator(".glass.rounded-2xl").filter(has=self.page.get_by_role("heading", name=title))

    @property
    def scheduler_modal(self) -> Locator:
        return self._modal("Schedule Time Block")

    @property
    def timer_modal(self) -> Locator:
        return self._modal("Activity Timer")

    @property
    def activity_name_input(self) -> Locator:
        return self.scheduler_modal.get_by_placeholder("Enter activity name...")

    @property
    def start_time_input(self) -> Locator:
        return self.scheduler_modal.locator('input[type="time"]')

    @property
    def schedule_button(self) -> Locator:
        return self.scheduler_modal.get_by_role("button", name="Schedule", exact=True)

    @property
    def timer_display(self) -> Locator:
        return self.timer_modal.get_by_text(TIMER_DISPLAY_RE)

    @property
    def timer_close_button(self) -> Locator:
        return self.timer_modal.locator("button:has(svg.lucide-x)")

    async def verify_loaded(self) -> None:
        await expect(self.heading).to_have_text("Today", timeout=self.timeout_ms)
        await expect(self.previous_day_button).to_be_visible(timeout=self.timeout_ms)
        await expect(self.next_day_button).to_be_visible(timeout=self.timeout_ms)

    async def current_title(self) -> str:
        return (await self.heading.text_content() or "").strip()

    async def go_previous_day(self) -> str:
        before = await self.current_title()
        await self.previous_day_button.click()
        await expect(self.heading).not_to_have_text(before, timeout=self.timeout_ms)
        return await self.current_title()

    async def go_next_day(self) -> str:
        before = await self.current_title()
        await self.next_day_button.click()
        await expect(self.heading).not_to_have_text(before, timeout=self.timeout_ms)
        return await self.current_title()

    async def open_scheduler(self) -> Locator:
        await self.add_block_button.click()
        await expect(self.scheduler_modal).to_be_visible(timeout=self.timeout_ms)
        return self.scheduler_modal

    async def schedule_time_block(self, activity_name: str, start_time: Optional[str] = None) -> None:
        """Create a planned block; the modal only closes once the save succeeded.

        ``start_time`` is ``HH:MM``.
        """
        await self.open_scheduler()
        await self.activity_name_input.fill(activity_name)
        if start_time is not None:
            await self.start_time_input.fill(start_time)
        await expect(self.schedule_button).to_be_enabled(timeout=self.timeout_ms)
        await self.schedule_button.click()
        await expect(self.scheduler_modal).to_be_hidden(timeout=self.timeout_ms)

    async def open_timer(self) -> Locator:
        await self.start_timer_button.click()
        await expect(self.timer_modal).to_be_visible(timeout=self.timeout_ms)
        return self.timer_modal

    async def close_timer(self) -> None:
        await self.timer_close_button.click()
        await expect(self.timer_modal).to_be_hidden(timeout=self.timeout_ms)
