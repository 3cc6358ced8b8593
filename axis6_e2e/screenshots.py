"""Numbered screenshot capture for multi-step scenarios."""
from __future__ import annotations

import logging
import re
from pathlib import Path

from axis6_e2e.browser import Browser

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    return _UNSAFE.sub("-", value.lower()).strip("-")


class ScreenshotHelper:
    """Capture screenshots named ``<phase>-<step>-<page>.png``.

    One helper per scenario phase; steps are numbered in capture order so a
    directory listing reads like the scenario.
    """

    def __init__(self, browser: Browser, phase: str):
        self.browser = browser
        self.phase = slugify(phase)
        self._step = 0

    def next_name(self, name: str) -> str:
        self._step += 1
        return f"{self.phase}-{self._step:02d}-{slugify(name)}"

    async def capture(self, name: str, description: str = "") -> Path:
        """Capture a full-page screenshot.

        Args:
            name: Page or state name (e.g. 'login-page')
            description: Optional description for the log line
        """
        filename = self.next_name(name)
        path = await self.browser.screenshot(filename)
        if description:
            logger.info("📸 %s: %s", path.name, description)
        else:
            logger.info("📸 %s", path.name)
        return path
