"""Dashboard: hexagon chart and the six daily check-in cards."""
from __future__ import annotations

from typing import Dict, Tuple

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage

AXES: Tuple[str, ...] = ("Physical", "Mental", "Emotional", "Social", "Spiritual", "Material")


class DashboardPage(BasePage):
    PATH = "/dashboard"

    @property
    def hexagon_chart(self) -> Locator:
        return self.by_testid("hexagon-chart")

    @property
    def category_cards(self) -> Locator:
        return self.by_testid("category-cards")

    def category_card(self, axis: str) -> Locator:
        return self.by_testid(f"category-card-{axis.lower()}")

    def toggle_button(self, axis: str) -> Locator:
        return self.category_card(axis).get_by_role("button", name=f"Toggle {axis}", exact=True)

    @property
    def user_menu(self) -> Locator:
        return self.by_testid("user-menu")

    @property
    def logout_button(self) -> Locator:
        return self.page.get_by_role("button", name="Cerrar Sesión")

    @property
    def my_day_link(self) -> Locator:
        return self.page.get_by_role("link", name="Plan and track your daily activities")

    @property
    def analytics_link(self) -> Locator:
        return self.page.get_by_role("link", name="View complete progress analysis")

    @property
    def achievements_link(self) -> Locator:
        return self.page.get_by_role("link", name="View your achievements and recognitions")

    async def verify_dashboard_loaded(self) -> None:
        await self.verify_url()
        await expect(self.hexagon_chart).to_be_visible(timeout=self.timeout_ms)
        await expect(self.category_cards).to_be_visible(timeout=self.timeout_ms)

    verify_loaded = verify_dashboard_loaded

    async def is_checked(self, axis: str) -> bool:
        return (await self.category_card(axis).get_attribute("data-checked")) == "true"

    async def checked_states(self) -> Dict[str, bool]:
        return {axis: await self.is_checked(axis) for axis in AXES}

    async def toggle_category(self, axis: str) -> bool:
        """Toggle one axis check-in and wait for the card to flip. Returns the new state."""
        before = await self.is_checked(axis)
        expected = "false" if before else "true"
        await self.toggle_button(axis).click()
        await expect(self.category_card(axis)).to_have_attribute("data-checked", expected, timeout=self.timeout_ms)
        return not before

    async def logout(self) -> None:
        await self.user_menu.click()
        await self.logout_button.click()
        await self.page.wait_for_url("**/auth/login**", timeout=self.timeout_ms)
