"""Observational site checks. Soft: logged through the reporter, never failing.

Run on demand with: pytest -m probe axis6_e2e/tests -v
"""
import pytest

from axis6_e2e.pages import AXES
from axis6_e2e.routes import ROUTES

pytestmark = [pytest.mark.asyncio, pytest.mark.probe]


async def test_public_pages_survey(browser, reporter, screenshots):
    for route in ROUTES.public_pages():
        reporter.scope(route.rule)
        result = await browser.goto(route.rule)
        status = result.get("status") or 0
        reporter.check("responds", 0 < status < 400, f"HTTP {status}")
        await screenshots.capture(route.name)


async def test_authenticated_pages_survey(authenticated_page, reporter, screenshots):
    for route in ROUTES.protected_pages():
        if route.rule == "/auth/onboarding":
            continue
        reporter.scope(route.rule)
        await authenticated_page.browser.goto(route.rule)
        reporter.check("stays on route", route.rule in authenticated_page.page.url, authenticated_page.page.url)
        reporter.check("has a heading", await authenticated_page.browser.count("h1") > 0)
        await screenshots.capture(route.name)


async def test_dashboard_feature_survey(dashboard_page, reporter):
    await dashboard_page.goto()
    reporter.check("hexagon chart", await dashboard_page.hexagon_chart.count() > 0)
    for axis in AXES:
        reporter.check(f"{axis} card", await dashboard_page.category_card(axis).count() > 0)
    reporter.check("user menu hook", await dashboard_page.user_menu.count() > 0)
    if await dashboard_page.category_cards.count():
        states = await dashboard_page.checked_states()
        reporter.note("checked_axes", sum(states.values()))
