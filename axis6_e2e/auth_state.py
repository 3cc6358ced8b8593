"""
Authentication state management for the fixed test account.

Logging in through the form for every scenario is slow and, against
production, trips the rate limiter. When AXIS6_TEST_EMAIL is configured the
session cookies are saved after the first login and restored into later
contexts. Generated users are never persisted.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Optional

from playwright.async_api import BrowserContext

from axis6_e2e.browser import Browser
from axis6_e2e.config import UiTargetProfile
from axis6_e2e.routes import AUTHENTICATED_LANDING_RE
from axis6_e2e.workflows import UserFormData, authenticate, user_for_profile

logger = logging.getLogger(__name__)

# Storage state files (Playwright session cookies/localStorage)
AUTH_STATE_DIR = Path(__file__).parent.parent / "tmp" / "auth-states"


def state_file_for(profile: UiTargetProfile, directory: Path = AUTH_STATE_DIR) -> Path:
    """``<profile>_<account>_auth_state.json``"""
    account = re.sub(r"[^a-z0-9]+", "-", (profile.fixed_email or "anonymous").lower()).strip("-")
    return directory / f"{profile.name}_{account}_auth_state.json"


async def save_auth_state(context: BrowserContext, profile: UiTargetProfile) -> Path:
    """Save cookies and localStorage of an authenticated context."""
    state_file = state_file_for(profile)
    state_file.parent.mkdir(parents=True, exist_ok=True)
    await context.storage_state(path=str(state_file))
    logger.info("Saved auth state to %s", state_file)
    return state_file


async def load_auth_state(context: BrowserContext, profile: UiTargetProfile) -> bool:
    """Add saved cookies to ``context``. Returns False when nothing is saved."""
    state_file = state_file_for(profile)
    if not state_file.exists():
        return False

    with open(state_file) as f:
        state = json.load(f)

    cookies = state.get("cookies") or []
    if not cookies:
        return False
    await context.add_cookies(cookies)
    logger.info("Loaded %d cookies from %s", len(cookies), state_file)
    return True


def clear_auth_state(profile: UiTargetProfile) -> None:
    state_file = state_file_for(profile)
    if state_file.exists():
        state_file.unlink()
        logger.info("Cleared auth state: %s", state_file)


async def ensure_authenticated(
    browser: Browser,
    profile: UiTargetProfile,
    user: Optional[UserFormData] = None,
    force_login: bool = False,
) -> UserFormData:
    """Reuse a saved session for fixed accounts, otherwise authenticate through the UI.

    1. Fixed account with saved cookies: load them and visit /dashboard
    2. Still authenticated: done
    3. Otherwise: clear the stale state, log in (or register) and save
    """
    user = user or user_for_profile(profile)
    context = browser.page.context

    if not user.generated and not force_login and await load_auth_state(context, profile):
        await browser.goto("/dashboard", wait_until="domcontentloaded")
        if AUTHENTICATED_LANDING_RE.search(browser.page.url):
            logger.info("Using saved authentication state for %s", user.email)
            return user
        logger.warning("Saved auth state invalid, performing fresh login")
        clear_auth_state(profile)
        await context.clear_cookies()

    user = await authenticate(browser, user=user, profile=profile)
    if not user.generated:
        await save_auth_state(context, profile)
    return user
