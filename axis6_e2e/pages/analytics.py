from __future__ import annotations

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage

OVERVIEW_CARDS = ("Total Check-ins", "Active Days", "Completion Rate", "Current Streak")
PERIODS = ("7", "30", "90", "365")


class AnalyticsPage(BasePage):
    PATH = "/analytics"
    HEADING = "Your Analytics"

    def overview_card(self, title: str) -> Locator:
        return self.page.get_by_role("heading", level=3, name=title, exact=True)

    @property
    def period_select(self) -> Locator:
        return self.page.get_by_role("combobox")

    async def verify_loaded(self) -> None:
        await self.verify_url()
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)

    async def verify_overview(self) -> None:
        for title in OVERVIEW_CARDS:
            await expect(self.overview_card(title)).to_be_visible(timeout=self.timeout_ms)

    async def select_period(self, days: str) -> None:
        if days not in PERIODS:
            raise ValueError(f"period must be one of {', '.join(PERIODS)} (got {days!r})")
        await self.period_select.select_option(days)
        await expect(self.period_select).to_have_value(days, timeout=self.timeout_ms)
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)


class AchievementsPage(BasePage):
    PATH = "/achievements"
    HEADING = "Logros"

    async def verify_loaded(self) -> None:
        await self.verify_url()
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)
