"""Thin wrapper around direct Playwright for ergonomic assertions."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional

import anyio
from playwright.async_api import Error as PlaywrightError, Page, TimeoutError as PlaywrightTimeout

from axis6_e2e.config import settings
from axis6_e2e.devices import DESKTOP, DeviceProfile
from axis6_e2e.playwright_client import PlaywrightClient

logger = logging.getLogger(__name__)


@dataclass
class ToolError(Exception):
    """Raised when a browser operation fails."""

    name: str
    payload: Dict[str, Any]
    message: str

    def __str__(self) -> str:  # pragma: no cover - human readable helper
        return f"{self.name} failed ({self.message}) with payload={self.payload}"


class Browser:
    """Convenience wrapper over a Playwright page."""

    def __init__(self, page: Page) -> None:
        self._page = page
        self.current_url: str | None = None
        self.current_title: str | None = None

    @property
    def page(self) -> Page:
        return self._page

    async def _update_state(self) -> None:
        self.current_url = self._page.url
        self.current_title = await self._page.title()

    async def goto(self, url: str, wait_until: str = "networkidle", timeout: Optional[int] = None) -> Dict[str, Any]:
        """Navigate to URL and return url, title and HTTP status.

        Relative paths are resolved against the active profile's base URL.

        Note: "networkidle" never settles on pages holding a realtime
        websocket open (chat, dashboard); those fall back to
        "domcontentloaded".
        """
        if url.startswith("/"):
            url = settings.url(url)
        timeout = timeout or settings.navigation_timeout_ms
        try:
            response = await self._page.goto(url, wait_until=wait_until, timeout=timeout)
            await self._update_state()
            return {"url": self.current_url, "title": self.current_title, "status": response.status if response else None}
        except PlaywrightTimeout as exc:
            if wait_until == "networkidle":
                logger.debug("networkidle timed out for %s, retrying with domcontentloaded", url)
                try:
                    response = await self._page.goto(url, wait_until="domcontentloaded", timeout=timeout)
                    await self._update_state()
                    return {"url": self.current_url, "title": self.current_title, "status": response.status if response else None}
                except PlaywrightTimeout:
                    pass  # Fall through to original error
            raise ToolError(name="goto", payload={"url": url, "wait_until": wait_until}, message=str(exc))
        except PlaywrightError as exc:
            raise ToolError(name="goto", payload={"url": url, "wait_until": wait_until}, message=str(exc))

    async def reload(self) -> Dict[str, Any]:
        try:
            response = await self._page.reload(wait_until="domcontentloaded")
            await self._update_state()
            return {"url": self.current_url, "status": response.status if response else None}
        except Exception as exc:
            raise ToolError(name="reload", payload={"url": self._page.url}, message=str(exc))

    async def text(self, selector: str) -> str:
        """Get text content of element."""
        try:
            text = await self._page.text_content(selector, timeout=5000)
            return text or ""
        except Exception as exc:
            raise ToolError(name="text", payload={"selector": selector}, message=str(exc))

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Execute JavaScript in the page context."""
        try:
            return await self._page.evaluate(script, arg)
        except Exception as exc:
            raise ToolError(name="evaluate", payload={"script": script}, message=str(exc))

    async def count(self, selector: str) -> int:
        return await self._page.locator(selector).count()

    async def wait_for_path(self, pattern, timeout: float = 30.0, interval: float = 0.25) -> str:
        """Poll the page URL until ``pattern`` (compiled regex) matches it.

        Client-side routers change the URL without a navigation event, so
        ``page.wait_for_url`` alone misses some transitions.
        """
        deadline = anyio.current_time() + timeout
        while anyio.current_time() <= deadline:
            if pattern.search(self._page.url):
                self.current_url = self._page.url
                return self._page.url
            await anyio.sleep(interval)
        raise AssertionError(f"Timed out waiting for URL matching {pattern.pattern!r}; last URL: {self._page.url}")

    async def content_width(self) -> int:
        """Widest of body/documentElement scroll widths."""
        return await self.evaluate(
            "() => Math.max(document.body ? document.body.scrollWidth : 0, document.documentElement.scrollWidth)"
        )

    async def clear_session(self) -> None:
        """Drop cookies and web storage so the next navigation is anonymous."""
        await self._page.context.clear_cookies()
        if self._page.url.startswith("http"):
            await self.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")

    async def screenshot(self, name: str, full_page: bool = True) -> Path:
        """Save a PNG into the configured screenshot directory."""
        directory = settings.screenshot_dir
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path = directory / f"{name}.png"
            await self._page.screenshot(path=str(path), type="png", full_page=full_page)
            return path
        except Exception as exc:
            raise ToolError(name="screenshot", payload={"name": name, "dir": str(directory)}, message=str(exc))


@asynccontextmanager
async def browser_session(device: DeviceProfile = DESKTOP, **client_kwargs: Any) -> AsyncIterator[Browser]:
    """Yield a Browser on a fresh client, e.g. for a per-device context."""
    client = PlaywrightClient(device=device, **client_kwargs)
    await client.connect()
    try:
        yield Browser(client.page)
    finally:
        await client.close()
