"""Page-object base class."""
from __future__ import annotations

import re
from typing import Any, ClassVar, Dict, Optional

from playwright.async_api import Locator, Page, expect

from axis6_e2e.browser import Browser


def testid(value: str) -> str:
    """CSS selector for a ``data-testid`` hook."""
    return f'[data-testid="{value}"]'


class BasePage:
    """Selectors and composite actions for one logical page.

    Locator properties are lazy: nothing is queried until a locator is used,
    and every use re-resolves against the live DOM. ``verify_loaded``
    asserts the load-bearing elements are visible and fails once the
    ``expect`` timeout runs out.
    """

    PATH: ClassVar[str] = "/"
    HEADING: ClassVar[Optional[str]] = None

    def __init__(self, browser: Browser, timeout_ms: int = 10000) -> None:
        self.browser = browser
        self.timeout_ms = timeout_ms

    @property
    def page(self) -> Page:
        return self.browser.page

    def by_testid(self, value: str) -> Locator:
        return self.page.locator(testid(value))

    @property
    def heading(self) -> Locator:
        if self.HEADING is None:
            return self.page.locator("h1").first
        return self.page.get_by_role("heading", level=1, name=self.HEADING)

    async def goto(self, path: Optional[str] = None) -> Dict[str, Any]:
        result = await self.browser.goto(path or self.PATH)
        await self.wait_ready()
        return result

    async def wait_ready(self) -> None:
        await self.page.wait_for_load_state("domcontentloaded")

    async def verify_url(self) -> None:
        await expect(self.page).to_have_url(re.compile(re.escape(self.PATH) + r"(?:[/?#]|$)"), timeout=self.timeout_ms)

    async def verify_loaded(self) -> None:
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)
