"""
Fixtures for the AXIS6 browser scenarios.

Every browser fixture runs once per configured target profile (see
``active_profile``). Scenarios are skipped, not failed, when the target is
unreachable.
"""
import logging
from typing import Dict

import httpx
import pytest
import pytest_asyncio

from axis6_e2e.auth_state import ensure_authenticated
from axis6_e2e.browser import Browser
from axis6_e2e.config import UiTargetProfile, settings
from axis6_e2e.diagnostics import PageDiagnostics
from axis6_e2e.pages import DashboardPage, LandingPage, LoginPage, RegisterPage
from axis6_e2e.playwright_client import PlaywrightClient
from axis6_e2e.reporter import Reporter
from axis6_e2e.screenshots import ScreenshotHelper
from axis6_e2e.workflows import AuthenticatedSession, user_for_profile

logger = logging.getLogger(__name__)

_reachability: Dict[str, bool] = {}


def _profile_id(profile: UiTargetProfile) -> str:
    return profile.name


@pytest.fixture(params=settings.profiles(), ids=_profile_id)
def active_profile(request):
    """Activate each configured UI target profile for the test run."""
    profile: UiTargetProfile = request.param
    with settings.use_profile(profile):
        yield profile


def _apply_marker_guards(request):
    """Skip ``mutates`` scenarios on read-only profiles and ``production`` ones elsewhere."""
    if request.node.get_closest_marker("mutates") and not settings.allow_writes:
        pytest.skip(f"profile '{settings.active.name}' is read-only (UI_ALLOW_WRITES=0)")
    if request.node.get_closest_marker("production") and not (
        settings.is_production or settings.base_url.startswith("https://")
    ):
        pytest.skip("production-only check (set NODE_ENV=production or target an https URL)")


@pytest.fixture()
def live_target(request, active_profile):
    """Base URL of the active profile; skips when nothing answers there."""
    _apply_marker_guards(request)
    base_url = active_profile.base_url
    if base_url not in _reachability:
        try:
            with httpx.Client(timeout=5.0, follow_redirects=True) as client:
                _reachability[base_url] = client.get(base_url).status_code < 500
        except httpx.HTTPError:
            _reachability[base_url] = False
    if not _reachability[base_url]:
        pytest.skip(f"AXIS6 not reachable at {base_url}")
    return base_url


@pytest_asyncio.fixture()
async def playwright_client(live_target):
    """Create a Playwright client instance."""
    async with PlaywrightClient() as client:
        yield client


@pytest_asyncio.fixture()
async def browser(playwright_client):
    """Create a Browser instance with the Playwright page."""
    return Browser(playwright_client.page)


@pytest.fixture()
def diagnostics(browser):
    return PageDiagnostics().attach(browser.page)


@pytest.fixture()
def reporter(request):
    """Structured outcome log for one scenario."""
    report = Reporter(name=request.node.name)
    yield report
    if report.results:
        logger.info(report.summary())


@pytest.fixture()
def screenshots(browser, request):
    return ScreenshotHelper(browser, request.node.name)


@pytest.fixture()
def test_user(active_profile):
    """Fixed account when configured, otherwise a unique generated user."""
    return user_for_profile(active_profile)


@pytest_asyncio.fixture()
async def authenticated_page(browser, active_profile, test_user):
    """Browser parked on an authenticated route plus the user it belongs to.

    Registration creates a remote account, so read-only profiles need a fixed
    account. Authentication failures raise here, before the scenario body.
    """
    if test_user.generated and not active_profile.allow_writes:
        pytest.skip("read-only profile without AXIS6_TEST_EMAIL/AXIS6_TEST_PASSWORD")
    user = await ensure_authenticated(browser, active_profile, user=test_user)
    if "/auth/onboarding" in browser.page.url:
        # New accounts start on onboarding; scenarios expect the dashboard
        await browser.goto("/dashboard", wait_until="domcontentloaded")
    return AuthenticatedSession(browser=browser, user=user)


@pytest.fixture()
def landing_page(browser):
    return LandingPage(browser, settings.default_timeout_ms)


@pytest.fixture()
def login_page(browser):
    return LoginPage(browser, settings.default_timeout_ms)


@pytest.fixture()
def register_page(browser):
    return RegisterPage(browser, settings.default_timeout_ms)


@pytest.fixture()
def dashboard_page(authenticated_page):
    return DashboardPage(authenticated_page.browser, settings.default_timeout_ms)
