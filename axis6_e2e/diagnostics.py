"""Console and network error capture for a page."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Pattern

from playwright.async_api import ConsoleMessage, Page, Request, Response

logger = logging.getLogger(__name__)

# Noise the browser or third parties produce on every healthy page
BENIGN_PATTERNS: List[Pattern[str]] = [
    re.compile(r"ResizeObserver loop", re.I),
    re.compile(r"Failed to load resource", re.I),
    re.compile(r"third-party cookie", re.I),
    re.compile(r"favicon\.ico", re.I),
    re.compile(r"Download the React DevTools", re.I),
    re.compile(r"\[Fast Refresh\]", re.I),
    re.compile(r"net::ERR_ABORTED"),
]


@dataclass
class CapturedError:
    kind: str  # console | pageerror | requestfailed | api
    message: str
    url: str = ""

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}" + (f" ({self.url})" if self.url else "")


def is_benign(message: str, patterns: List[Pattern[str]] = BENIGN_PATTERNS) -> bool:
    return any(p.search(message) for p in patterns)


@dataclass
class PageDiagnostics:
    """Collects console errors, uncaught exceptions, failed requests and API errors.

    ``attach`` wires the collector to a page's events; the ``record_*``
    methods are the event sinks and can be fed directly.
    """

    errors: List[CapturedError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    benign_patterns: List[Pattern[str]] = field(default_factory=lambda: list(BENIGN_PATTERNS))

    def attach(self, page: Page) -> "PageDiagnostics":
        page.on("console", self._on_console)
        page.on("pageerror", lambda exc: self.record_page_error(str(exc)))
        page.on("requestfailed", self._on_request_failed)
        page.on("response", self._on_response)
        return self

    def _on_console(self, message: ConsoleMessage) -> None:
        self.record_console(message.type, message.text)

    def _on_request_failed(self, request: Request) -> None:
        self.record_request_failed(request.url, request.failure or "unknown")

    def _on_response(self, response: Response) -> None:
        self.record_response(response.url, response.status)

    def record_console(self, kind: str, text: str) -> None:
        if kind == "error":
            self.errors.append(CapturedError("console", text))
            logger.debug("console error: %s", text)
        elif kind == "warning":
            self.warnings.append(text)

    def record_page_error(self, message: str) -> None:
        self.errors.append(CapturedError("pageerror", message))
        logger.debug("page error: %s", message)

    def record_request_failed(self, url: str, failure: str) -> None:
        self.errors.append(CapturedError("requestfailed", failure, url))

    def record_response(self, url: str, status: int) -> None:
        if "/api/" in url and status >= 400:
            self.errors.append(CapturedError("api", f"HTTP {status}", url))

    def by_kind(self, kind: str) -> List[CapturedError]:
        return [e for e in self.errors if e.kind == kind]

    def unexpected_errors(self, include_api: bool = False) -> List[CapturedError]:
        """Errors left after filtering benign noise.

        API 4xx responses are expected for unauthenticated calls, so they are
        excluded unless ``include_api`` is set.
        """
        return [
            e
            for e in self.errors
            if (include_api or e.kind != "api")
            and not is_benign(str(e), self.benign_patterns)
        ]

    def clear(self) -> None:
        self.errors.clear()
        self.warnings.clear()
