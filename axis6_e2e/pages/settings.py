from __future__ import annotations

from typing import Tuple

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage

SECTION_TESTIDS: Tuple[str, ...] = (
    "axis-customization-section",
    "general-settings-section",
    "privacy-settings-section",
)


class SettingsPage(BasePage):
    PATH = "/settings"
    HEADING = "Settings"

    @property
    def container(self) -> Locator:
        return self.by_testid("main-settings-container")

    @property
    def sections(self) -> Locator:
        return self.by_testid("settings-sections")

    def section(self, name: str) -> Locator:
        return self.by_testid(name)

    async def verify_loaded(self) -> None:
        await expect(self.container).to_be_visible(timeout=self.timeout_ms)
        await expect(self.sections).to_be_visible(timeout=self.timeout_ms)
        for name in SECTION_TESTIDS:
            await expect(self.section(name)).to_be_visible(timeout=self.timeout_ms)


class SettingsSubPage(BasePage):
    """``/settings/<name>`` pages; only the heading is stable across them."""

    def __init__(self, browser, path: str, timeout_ms: int = 10000) -> None:
        super().__init__(browser, timeout_ms)
        self.PATH = path

    async def verify_loaded(self) -> None:
        await self.verify_url()
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)
