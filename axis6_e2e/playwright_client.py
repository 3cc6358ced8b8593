"""
Direct Playwright Client
========================

Owns the Playwright driver, one browser and a default context/page. Every
scenario gets its own client, so cookies and storage never leak between
scenarios.

Usage:
    from axis6_e2e.playwright_client import PlaywrightClient

    async with PlaywrightClient(device=IPHONE_SE) as client:
        await client.page.goto(settings.url("/"))
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from axis6_e2e.config import settings
from axis6_e2e.devices import DESKTOP, DeviceProfile

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """
    Launches Playwright in-process and hands out pages.

    Example:
        async with PlaywrightClient() as client:
            await client.page.goto("https://axis6.app")
    """

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
        timeout: Optional[int] = None,
        navigation_timeout: Optional[int] = None,
        device: DeviceProfile = DESKTOP,
        storage_state_path: Optional[str] = None,
        extra_http_headers: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            browser_type: chromium, firefox or webkit (default from settings)
            headless: Run headless (default from settings)
            timeout: Default action timeout in milliseconds
            navigation_timeout: Default navigation timeout in milliseconds
            device: Viewport profile for the default context
            storage_state_path: Saved auth state to preload into the context
            extra_http_headers: Headers sent with every request
        """
        self.browser_type = browser_type or settings.browser_type
        self.headless = settings.playwright_headless if headless is None else headless
        self.timeout = timeout or settings.default_timeout_ms
        self.navigation_timeout = navigation_timeout or settings.navigation_timeout_ms
        self.device = device
        self.storage_state_path = storage_state_path
        self.extra_http_headers = extra_http_headers

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "PlaywrightClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def connect(self) -> None:
        """Launch the browser and open the default context and page."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            self._browser = await self._playwright.firefox.launch(headless=self.headless)
        elif self.browser_type == "webkit":
            self._browser = await self._playwright.webkit.launch(headless=self.headless)
        else:
            self._browser = await self._playwright.chromium.launch(headless=self.headless)

        storage_state_path = self.storage_state_path
        if storage_state_path and not os.path.exists(storage_state_path):
            logger.warning("storage_state_path does not exist, ignoring: %s", storage_state_path)
            storage_state_path = None

        self._context = await self.new_context(self.device, storage_state=storage_state_path)
        self._page = await self._context.new_page()
        logger.debug("Launched %s (headless=%s) with %s", self.browser_type, self.headless, self.device)

    async def new_context(self, device: Optional[DeviceProfile] = None, **kwargs: Any) -> BrowserContext:
        """
        Create an additional isolated context.

        Args:
            device: Viewport profile (defaults to the client's device)
            **kwargs: Extra ``Browser.new_context`` options
        """
        if not self._browser:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")

        options = (device or self.device).context_args()
        options["base_url"] = settings.base_url
        if self.extra_http_headers:
            options["extra_http_headers"] = self.extra_http_headers
        options.update({k: v for k, v in kwargs.items() if v is not None})

        context = await self._browser.new_context(**options)
        context.set_default_timeout(self.timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)
        return context

    async def close(self) -> None:
        """Close all connections and cleanup resources."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Client not connected")
        return self._browser

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Client not connected")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page
