from __future__ import annotations

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage


class LandingPage(BasePage):
    PATH = "/"

    @property
    def login_link(self) -> Locator:
        return self.page.locator('a[href="/auth/login"]').first

    @property
    def register_link(self) -> Locator:
        return self.page.locator('a[href="/auth/register"]').first

    @property
    def footer(self) -> Locator:
        return self.page.locator("footer")

    async def verify_loaded(self) -> None:
        await expect(self.login_link).to_be_visible(timeout=self.timeout_ms)
        await expect(self.register_link).to_be_visible(timeout=self.timeout_ms)

    async def click_login(self) -> None:
        await self.login_link.click()
        await self.page.wait_for_url("**/auth/login", timeout=self.timeout_ms)

    async def click_register(self) -> None:
        await self.register_link.click()
        await self.page.wait_for_url("**/auth/register", timeout=self.timeout_ms)
