"""Shared configuration for the AXIS6 browser suite.

Everything comes from environment variables so the same suite can target a
local dev server, a preview deployment or production:

- PLAYWRIGHT_PRODUCTION_URL wins over PLAYWRIGHT_BASE_URL, which wins over
  the local dev server default (http://localhost:6789).
- UI_SMOKE_BASE_URL adds a second, read-only profile that every
  ``active_profile`` scenario also runs against.
"""
from __future__ import annotations

import os
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional
from urllib.parse import urljoin

DEFAULT_BASE_URL = "http://localhost:6789"
BASE_URL_ENV_CHAIN = ("PLAYWRIGHT_PRODUCTION_URL", "PLAYWRIGHT_BASE_URL")

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


def resolve_base_url(environ: Mapping[str, str] | None = None) -> str:
    """Return the first non-empty base URL from the environment chain."""
    env = os.environ if environ is None else environ
    for key in BASE_URL_ENV_CHAIN:
        value = (env.get(key) or "").strip()
        if value:
            return value.rstrip("/")
    return DEFAULT_BASE_URL


@dataclass
class UiTargetProfile:
    """Host plus the account used to exercise it."""

    name: str
    base_url: str
    allow_writes: bool = True
    fixed_email: str | None = None
    fixed_password: str | None = None
    fixed_name: str | None = None

    @property
    def has_fixed_account(self) -> bool:
        return bool(self.fixed_email and self.fixed_password)


class UiTestConfig:
    """Configuration for one pytest process.

    Reads the environment once at construction. Pass ``environ`` to build an
    isolated instance (unit tests do this); the module-level ``settings``
    singleton reads ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ

        self.playwright_headless: bool = _flag(env.get("PLAYWRIGHT_HEADLESS"), True)
        self.browser_type: str = (env.get("PLAYWRIGHT_BROWSER") or "chromium").lower()
        if self.browser_type not in {"chromium", "firefox", "webkit"}:
            raise ValueError(
                f"PLAYWRIGHT_BROWSER must be chromium, firefox or webkit (got {self.browser_type!r})"
            )

        self.default_timeout_ms: int = int(env.get("UI_DEFAULT_TIMEOUT_MS") or 10000)
        self.navigation_timeout_ms: int = int(env.get("UI_NAVIGATION_TIMEOUT_MS") or 30000)
        self.screenshot_dir: Path = Path(env.get("SCREENSHOT_DIR") or "tests/screenshots")
        self.is_production: bool = (env.get("NODE_ENV") or "").lower() == "production"

        self.update_baselines: bool = _flag(env.get("UPDATE_BASELINES"), False)
        self.visual_threshold: float = float(env.get("VISUAL_THRESHOLD") or 0.01)

        primary = UiTargetProfile(
            name="primary",
            base_url=resolve_base_url(env),
            allow_writes=_flag(env.get("UI_ALLOW_WRITES"), True),
            fixed_email=env.get("AXIS6_TEST_EMAIL") or None,
            fixed_password=env.get("AXIS6_TEST_PASSWORD") or None,
            fixed_name=env.get("AXIS6_TEST_NAME") or None,
        )
        self._profiles: Dict[str, UiTargetProfile] = {primary.name: primary}

        smoke_base = (env.get("UI_SMOKE_BASE_URL") or "").strip()
        if smoke_base:
            # Production smoke runs default to read-only
            self._profiles["smoke"] = UiTargetProfile(
                name="smoke",
                base_url=smoke_base.rstrip("/"),
                allow_writes=_flag(env.get("UI_SMOKE_ALLOW_WRITES"), False),
                fixed_email=env.get("UI_SMOKE_TEST_EMAIL") or primary.fixed_email,
                fixed_password=env.get("UI_SMOKE_TEST_PASSWORD") or primary.fixed_password,
                fixed_name=primary.fixed_name,
            )

        self._active: UiTargetProfile = primary

    # ---- active profile helpers -------------------------------------------------
    @property
    def active(self) -> UiTargetProfile:
        return self._active

    @property
    def base_url(self) -> str:
        return self._active.base_url

    @property
    def allow_writes(self) -> bool:
        return self._active.allow_writes

    # ---- profile orchestration --------------------------------------------------
    def profiles(self) -> List[UiTargetProfile]:
        return list(self._profiles.values())

    def profile(self, name: str) -> Optional[UiTargetProfile]:
        return self._profiles.get(name)

    @contextmanager
    def use_profile(self, profile: UiTargetProfile) -> Iterator[UiTargetProfile]:
        """Temporarily switch the active profile.

        Works on a copy so a scenario cannot leak changes into the next one.
        """
        previous = self._active
        self._active = deepcopy(profile)
        try:
            yield self._active
        finally:
            self._active = previous

    # ---- utility helpers --------------------------------------------------------
    def url(self, path: str) -> str:
        """Return an absolute URL for the provided path."""
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))


settings = UiTestConfig()
