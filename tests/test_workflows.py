"""Test-user generation and login outcome classification."""

from __future__ import annotations

import re

import pytest

from axis6_e2e.config import UiTargetProfile
from axis6_e2e.pages.auth import ALERT_SELECTOR
from axis6_e2e.workflows import (
    TEST_EMAIL_DOMAIN,
    AuthenticationError,
    LoginOutcome,
    classify_login_outcome,
    generate_test_user,
    user_for_profile,
    wait_for_login_outcome,
)


def test_generated_emails_are_unique():
    emails = {generate_test_user().email for _ in range(200)}
    assert len(emails) == 200


def test_generated_user_shape():
    user = generate_test_user()
    assert re.fullmatch(rf"test-\d{{13}}-[0-9a-f]{{8}}@{re.escape(TEST_EMAIL_DOMAIN)}", user.email)
    assert user.password
    assert user.name.startswith("Test User")
    assert user.generated is True


def test_fixed_account_is_used_when_configured():
    profile = UiTargetProfile("p", "http://x", fixed_email="qa@axis6.app", fixed_password="pw")
    user = user_for_profile(profile)
    assert user.email == "qa@axis6.app"
    assert user.generated is False


def test_generated_user_without_fixed_account():
    assert user_for_profile(UiTargetProfile("p", "http://x")).generated is True


class TestClassifyLoginOutcome:
    def test_dashboard_is_authenticated(self):
        assert classify_login_outcome("http://localhost:6789/dashboard", False) is LoginOutcome.AUTHENTICATED

    def test_my_day_is_authenticated(self):
        assert classify_login_outcome("https://axis6.app/my-day?date=today", False) is LoginOutcome.AUTHENTICATED

    def test_login_with_error_is_rejected(self):
        assert classify_login_outcome("https://axis6.app/auth/login", True) is LoginOutcome.REJECTED

    def test_login_without_error_is_pending(self):
        assert classify_login_outcome("https://axis6.app/auth/login/", False) is LoginOutcome.PENDING

    def test_anywhere_else_is_unexpected(self):
        assert classify_login_outcome("https://axis6.app/", True) is LoginOutcome.UNEXPECTED
        assert classify_login_outcome("https://axis6.app/dashboard-old", False) is LoginOutcome.UNEXPECTED


def test_authentication_error_message():
    exc = AuthenticationError("Login rejected", url="https://axis6.app/auth/login", error_text="Invalid credentials")
    assert str(exc) == "Login rejected (at https://axis6.app/auth/login): Invalid credentials"


class _FakeAlert:
    """Stands in for the login page's alert locator."""

    def __init__(self, visible: bool, text: str = ""):
        self.visible = visible
        self.text = text

    @property
    def first(self):
        return self

    async def is_visible(self) -> bool:
        return self.visible

    async def text_content(self) -> str:
        return self.text

    async def count(self) -> int:
        return 1 if self.visible else 0


class _FakePage:
    def __init__(self, url: str, alert: _FakeAlert):
        self.url = url
        self.alert = alert
        self.selectors = []

    def locator(self, selector: str):
        self.selectors.append(selector)
        return self.alert


class _FakeBrowser:
    def __init__(self, page: _FakePage):
        self.page = page


@pytest.mark.asyncio
async def test_empty_live_region_on_login_page_is_not_a_rejection():
    page = _FakePage("https://axis6.app/auth/login", _FakeAlert(visible=True, text=""))

    outcome = await wait_for_login_outcome(_FakeBrowser(page), timeout=0.2, interval=0.05)

    assert outcome is LoginOutcome.PENDING


def test_login_alert_selector_skips_route_announcer():
    assert ALERT_SELECTOR.startswith('[role="alert"]')
    assert ":not(#__next-route-announcer__)" in ALERT_SELECTOR


@pytest.mark.asyncio
async def test_alert_lookup_uses_scoped_selector():
    page = _FakePage("https://axis6.app/auth/login", _FakeAlert(visible=False))

    await wait_for_login_outcome(_FakeBrowser(page), timeout=0.1, interval=0.05)

    assert page.selectors
    assert set(page.selectors) == {ALERT_SELECTOR}


@pytest.mark.asyncio
async def test_alert_with_message_is_a_rejection():
    page = _FakePage("https://axis6.app/auth/login", _FakeAlert(visible=True, text="Invalid login credentials"))

    outcome = await wait_for_login_outcome(_FakeBrowser(page), timeout=1.0, interval=0.05)

    assert outcome is LoginOutcome.REJECTED


@pytest.mark.asyncio
async def test_dashboard_url_wins_over_stale_alert():
    page = _FakePage("https://axis6.app/dashboard", _FakeAlert(visible=True, text=""))

    outcome = await wait_for_login_outcome(_FakeBrowser(page), timeout=1.0, interval=0.05)

    assert outcome is LoginOutcome.AUTHENTICATED
