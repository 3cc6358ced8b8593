"""Reusable workflows: test users, registration, login and session setup."""
from __future__ import annotations

import enum
import logging
import re
import secrets
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import anyio

from axis6_e2e.browser import Browser, ToolError
from axis6_e2e.config import UiTargetProfile, settings
from axis6_e2e.pages.auth import ALERT_SELECTOR, LoginPage, RegisterPage
from axis6_e2e.routes import AUTHENTICATED_LANDING_RE

logger = logging.getLogger(__name__)

TEST_EMAIL_DOMAIN = "axis6-playwright.local"
DEFAULT_TEST_PASSWORD = "TestPassword123!"

# Login and registration must settle within this window
AUTH_TIMEOUT_S = 30.0


class AuthenticationError(Exception):
    """Raised when a session could not be established."""

    def __init__(self, message: str, url: str = "", error_text: str = ""):
        super().__init__(message)
        self.url = url
        self.error_text = error_text

    def __str__(self) -> str:
        text = super().__str__()
        if self.url:
            text += f" (at {self.url})"
        if self.error_text:
            text += f": {self.error_text}"
        return text


@dataclass
class UserFormData:
    email: str
    password: str
    name: str
    generated: bool = True


@dataclass
class AuthenticatedSession:
    """What the ``authenticated_page`` fixture hands to a scenario."""

    browser: Browser
    user: UserFormData

    @property
    def page(self):
        return self.browser.page


def generate_test_user(prefix: str = "test", password: str = DEFAULT_TEST_PASSWORD) -> UserFormData:
    """Unique per call: millisecond timestamp plus a random token."""
    suffix = f"{int(time.time() * 1000)}-{secrets.token_hex(4)}"
    return UserFormData(
        email=f"{prefix}-{suffix}@{TEST_EMAIL_DOMAIN}",
        password=password,
        name=f"Test User {suffix[-8:]}",
    )


def user_for_profile(profile: UiTargetProfile) -> UserFormData:
    """Fixed account when the profile has one, otherwise a fresh generated user."""
    if profile.has_fixed_account:
        return UserFormData(
            email=profile.fixed_email,
            password=profile.fixed_password,
            name=profile.fixed_name or "AXIS6 Test User",
            generated=False,
        )
    return generate_test_user()


class LoginOutcome(enum.Enum):
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"  # still on /auth/login with a visible error
    PENDING = "pending"  # still on /auth/login, no error yet
    UNEXPECTED = "unexpected"


_LOGIN_SUCCESS_RE = re.compile(r"/(dashboard|my-day)(?:[/?#]|$)")


def classify_login_outcome(url: str, error_visible: bool) -> LoginOutcome:
    """Classify where a login attempt left the browser.

    Only a dashboard/my-day URL or the login page with a visible error are
    acceptable end states.
    """
    path = urlparse(url).path or "/"
    if _LOGIN_SUCCESS_RE.search(path):
        return LoginOutcome.AUTHENTICATED
    if path.rstrip("/") == LoginPage.PATH:
        return LoginOutcome.REJECTED if error_visible else LoginOutcome.PENDING
    return LoginOutcome.UNEXPECTED


async def wait_for_login_outcome(browser: Browser, timeout: float = AUTH_TIMEOUT_S, interval: float = 0.25) -> LoginOutcome:
    """Poll until the login attempt settles into a final outcome."""
    login_page = LoginPage(browser)
    deadline = anyio.current_time() + timeout
    outcome = LoginOutcome.PENDING
    while anyio.current_time() <= deadline:
        error_visible = await login_page.has_visible_error()
        outcome = classify_login_outcome(browser.page.url, error_visible)
        if outcome in (LoginOutcome.AUTHENTICATED, LoginOutcome.REJECTED):
            return outcome
        await anyio.sleep(interval)
    return outcome


async def login(browser: Browser, user: UserFormData, timeout: float = AUTH_TIMEOUT_S) -> LoginOutcome:
    login_page = LoginPage(browser)
    await login_page.goto()
    await login_page.verify_login_form()
    await login_page.login(user.email, user.password)
    outcome = await wait_for_login_outcome(browser, timeout=timeout)
    logger.info("Login as %s -> %s (%s)", user.email, outcome.value, browser.page.url)
    return outcome


async def register_user(browser: Browser, user: UserFormData, timeout: float = AUTH_TIMEOUT_S) -> str:
    """Submit the registration form and return the URL it settled on.

    Depending on the target's email-confirmation setting the app lands on
    onboarding/dashboard (session created) or bounces to /auth/login.
    """
    register_page = RegisterPage(browser)
    await register_page.goto()
    await register_page.verify_register_form()
    await register_page.register(user.email, user.password, user.name)

    settled = re.compile(AUTHENTICATED_LANDING_RE.pattern + r"|/auth/login(?:[/?#]|$)")
    try:
        url = await browser.wait_for_path(settled, timeout=timeout)
    except AssertionError as exc:
        raise AuthenticationError(
            "Registration did not complete",
            url=browser.page.url,
            error_text=await _alert_text(browser),
        ) from exc
    logger.info("Registered %s -> %s", user.email, url)
    return url


async def _alert_text(browser: Browser) -> str:
    try:
        if await browser.count(ALERT_SELECTOR):
            return await browser.text(ALERT_SELECTOR)
    except ToolError:
        pass
    return ""


async def authenticate(
    browser: Browser,
    user: Optional[UserFormData] = None,
    profile: Optional[UiTargetProfile] = None,
    timeout: float = AUTH_TIMEOUT_S,
) -> UserFormData:
    """Leave ``browser`` on an authenticated route.

    Fixed accounts log in. Generated users register first, then log in when
    the target requires email confirmation. Raises ``AuthenticationError``
    if no authenticated route is reached.
    """
    profile = profile or settings.active
    user = user or user_for_profile(profile)

    if user.generated:
        if not profile.allow_writes:
            raise AuthenticationError(
                f"Profile '{profile.name}' is read-only; set AXIS6_TEST_EMAIL/AXIS6_TEST_PASSWORD"
            )
        url = await register_user(browser, user, timeout=timeout)
        if AUTHENTICATED_LANDING_RE.search(urlparse(url).path):
            return user

    outcome = await login(browser, user, timeout=timeout)
    if outcome is not LoginOutcome.AUTHENTICATED:
        raise AuthenticationError(
            f"Login {outcome.value} for {user.email}",
            url=browser.page.url,
            error_text=await _alert_text(browser),
        )
    return user
