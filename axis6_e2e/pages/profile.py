from __future__ import annotations

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage


class ProfilePage(BasePage):
    PATH = "/profile"
    HEADING = "My Profile"

    @property
    def container(self) -> Locator:
        return self.by_testid("main-profile-container")

    async def verify_loaded(self) -> None:
        await expect(self.container).to_be_visible(timeout=self.timeout_ms)
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)

    async def shows_email(self, email: str) -> bool:
        return await self.container.get_by_text(email, exact=False).count() > 0
