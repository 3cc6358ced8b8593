#!/usr/bin/env python3
"""
AXIS6 Site Health Probe

Observational checks against a running AXIS6 deployment, kept out of the
pass/fail regression suite. Every check is soft: it is logged and recorded
in the report, and the exit code is the number of failed checks.

Checks:
- Target reachability (remaining checks are skipped when down)
- API liveness (status < 500)
- Public pages load without unexpected console errors
- Protected pages redirect anonymous visitors to /auth/login
- No horizontal overflow at any breakpoint
- Landing page navigation timing
- Security headers (https targets only)

Usage:
    axis6-site-probe [--base-url URL] [--report PATH] [--no-screenshots] [-v]

Exit codes:
    0 = All checks passed
    N = Number of failed checks
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import anyio
import httpx
from playwright.async_api import TimeoutError as PlaywrightTimeout

from axis6_e2e.api_probe import is_reachable, missing_security_headers, probe_endpoints
from axis6_e2e.browser import Browser, ToolError, browser_session
from axis6_e2e.config import UiTargetProfile, resolve_base_url, settings
from axis6_e2e.devices import BREAKPOINTS, fits_viewport
from axis6_e2e.diagnostics import PageDiagnostics
from axis6_e2e.performance import LOAD_TARGET_MS, navigation_timing
from axis6_e2e.reporter import Reporter
from axis6_e2e.routes import API_ENDPOINTS, ROUTES
from axis6_e2e.screenshots import ScreenshotHelper

logger = logging.getLogger(__name__)

RESPONSIVE_PATHS = ("/", "/auth/login", "/auth/register")


class SiteProbe:
    """Runs every probe check against one base URL."""

    def __init__(self, base_url: str, screenshots: bool = True):
        self.base_url = base_url.rstrip("/")
        self.screenshots = screenshots
        self.reporter = Reporter(name=f"site-probe {self.base_url}")

    async def check_api(self) -> None:
        self.reporter.scope("api")
        for result in await probe_endpoints(self.base_url, API_ENDPOINTS):
            detail = f"HTTP {result.status}" if result.status else result.error
            self.reporter.check(f"GET {result.path} < 500", result.ok, detail)

    async def check_public_pages(self, browser: Browser) -> None:
        shots = ScreenshotHelper(browser, "probe") if self.screenshots else None
        diagnostics = PageDiagnostics().attach(browser.page)
        for route in ROUTES.public_pages():
            self.reporter.scope(route.rule)
            diagnostics.clear()
            try:
                result = await browser.goto(route.rule)
            except ToolError as exc:
                self.reporter.check("page loads", False, exc.message)
                continue
            status = result.get("status") or 0
            self.reporter.check("page loads", 0 < status < 400, f"HTTP {status}")
            errors = diagnostics.unexpected_errors()
            self.reporter.check("no unexpected console errors", not errors, "; ".join(map(str, errors[:3])))
            if shots:
                await shots.capture(route.name)

    async def check_protected_redirects(self, browser: Browser) -> None:
        await browser.clear_session()
        for route in ROUTES.protected_pages():
            if route.rule.startswith("/auth"):
                continue
            self.reporter.scope(route.rule)
            try:
                await browser.goto(route.rule, wait_until="domcontentloaded")
                await browser.page.wait_for_url("**/auth/login**", timeout=10000)
                redirected = True
            except (ToolError, PlaywrightTimeout):
                redirected = False
            self.reporter.check("anonymous visit redirects to /auth/login", redirected, browser.page.url)

    async def check_responsive(self) -> None:
        for device in BREAKPOINTS:
            async with browser_session(device=device) as browser:
                for path in RESPONSIVE_PATHS:
                    self.reporter.scope(f"{device.slug} {path}")
                    try:
                        await browser.goto(path)
                        width = await browser.content_width()
                    except ToolError as exc:
                        self.reporter.check("page loads", False, exc.message)
                        continue
                    self.reporter.check("no horizontal overflow", fits_viewport(width, device), f"content {width}px, viewport {device.width}px")

    async def check_performance(self, browser: Browser) -> None:
        self.reporter.scope("/")
        started = anyio.current_time()
        try:
            await browser.goto("/", wait_until="load")
            elapsed_ms = (anyio.current_time() - started) * 1000
            timing = await navigation_timing(browser)
        except ToolError as exc:
            self.reporter.check("landing loads", False, exc.message)
            return
        except PlaywrightTimeout as exc:
            self.reporter.check("landing loads", False, str(exc))
            return
        for key, value in timing.as_dict().items():
            self.reporter.note(key, value)
        self.reporter.check(f"landing loads under {LOAD_TARGET_MS} ms", elapsed_ms < LOAD_TARGET_MS, f"{elapsed_ms:.0f} ms")
        for violation in timing.budget_violations():
            self.reporter.check("navigation timing budget", False, violation)

    async def check_security_headers(self) -> None:
        if not self.base_url.startswith("https://"):
            logger.info("Skipping security headers for non-https target %s", self.base_url)
            return
        self.reporter.scope("headers")
        try:
            async with httpx.AsyncClient(timeout=10.0, follow_redirects=True) as client:
                response = await client.get(self.base_url)
        except httpx.HTTPError as exc:
            self.reporter.check("security headers present", False, str(exc))
            return
        missing = missing_security_headers(response.headers)
        self.reporter.check("security headers present", not missing, ", ".join(missing))

    async def run(self) -> Reporter:
        profile = UiTargetProfile(name="probe", base_url=self.base_url, allow_writes=False)
        with settings.use_profile(profile):
            self.reporter.scope("target")
            reachable = await is_reachable(self.base_url)
            self.reporter.check("target reachable", reachable, self.base_url)
            if not reachable:
                logger.error("Target %s is unreachable, skipping remaining checks", self.base_url)
                return self.reporter
            await self.check_api()
            await self.check_security_headers()
            async with browser_session() as browser:
                await self.check_public_pages(browser)
                await self.check_protected_redirects(browser)
                await self.check_performance(browser)
            await self.check_responsive()
        logger.info(self.reporter.summary())
        return self.reporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="axis6-site-probe",
        description="Observational health probe for an AXIS6 deployment",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Target URL (default: $PLAYWRIGHT_PRODUCTION_URL, $PLAYWRIGHT_BASE_URL or http://localhost:6789)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a JSON report to this path",
    )
    parser.add_argument(
        "--screenshots",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Capture a screenshot of every public page (default: on)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    probe = SiteProbe(base_url=args.base_url or resolve_base_url(), screenshots=args.screenshots)
    reporter = anyio.run(probe.run)

    if args.report:
        reporter.write_json(args.report, extra={"base_url": probe.base_url})

    failures = reporter.failures
    if failures:
        logger.error("%d check(s) failed", len(failures))
        for failure in failures:
            logger.error("  [%s] %s", failure.scope, failure.line())
    else:
        logger.info("All checks passed")
    return len(failures)


if __name__ == "__main__":
    sys.exit(main())
