"""Route registry for the AXIS6 application under test.

The application is a Next.js app we only see from the outside, so routes are
declared here rather than discovered. Scenarios, the screenshot capture and
the site probe all read from this one table.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

_PARAM_RE = re.compile(r":[A-Za-z_]+")


@dataclass(frozen=True)
class RouteInfo:
    """One application route."""
    rule: str  # /chat/:id
    name: str
    auth_required: bool = False
    is_api: bool = False

    @property
    def has_params(self) -> bool:
        return bool(_PARAM_RE.search(self.rule))

    @property
    def is_static(self) -> bool:
        """True if the route can be visited without filling parameters."""
        return not self.has_params

    @property
    def category(self) -> str:
        if self.is_api:
            return "api"
        if self.rule.startswith("/auth"):
            return "auth"
        if self.rule.startswith("/settings"):
            return "settings"
        if self.rule.startswith("/chat"):
            return "chat"
        return "app" if self.auth_required else "public"

    def build(self, **params: str) -> str:
        """Fill ``:param`` placeholders."""
        path = self.rule
        for key, value in params.items():
            path = path.replace(f":{key}", value)
        if _PARAM_RE.search(path):
            raise ValueError(f"Missing parameters for {self.rule}: {params}")
        return path


@dataclass
class RouteRegistry:
    routes: List[RouteInfo] = field(default_factory=list)

    def add(self, route: RouteInfo) -> None:
        self.routes.append(route)

    def get(self, rule: str) -> RouteInfo:
        for route in self.routes:
            if route.rule == rule:
                return route
        raise KeyError(rule)

    def by_category(self, category: str) -> List[RouteInfo]:
        return [r for r in self.routes if r.category == category]

    def pages(self) -> List[RouteInfo]:
        return [r for r in self.routes if not r.is_api]

    def static_pages(self) -> List[RouteInfo]:
        """Pages without URL parameters (can be visited directly)."""
        return [r for r in self.pages() if r.is_static]

    def public_pages(self) -> List[RouteInfo]:
        return [r for r in self.static_pages() if not r.auth_required]

    def protected_pages(self) -> List[RouteInfo]:
        return [r for r in self.static_pages() if r.auth_required]

    def api_endpoints(self) -> List[RouteInfo]:
        return [r for r in self.routes if r.is_api]


def _build_registry() -> RouteRegistry:
    registry = RouteRegistry()

    for rule, name in [
        ("/", "landing"),
        ("/auth/login", "login"),
        ("/auth/register", "register"),
        ("/privacy", "privacy"),
        ("/terms", "terms"),
        ("/pricing", "pricing"),
    ]:
        registry.add(RouteInfo(rule, name))

    for rule, name in [
        ("/auth/onboarding", "onboarding"),
        ("/dashboard", "dashboard"),
        ("/my-day", "my-day"),
        ("/analytics", "analytics"),
        ("/achievements", "achievements"),
        ("/profile", "profile"),
        ("/settings", "settings"),
        ("/settings/account", "settings-account"),
        ("/settings/privacy", "settings-privacy"),
        ("/settings/security", "settings-security"),
        ("/settings/notifications", "settings-notifications"),
        ("/settings/focus", "settings-focus"),
        ("/settings/axis-customization", "settings-axis-customization"),
        ("/chat", "chat"),
        ("/chat/new", "chat-new"),
        ("/chat/:id", "chat-room"),
    ]:
        registry.add(RouteInfo(rule, name, auth_required=True))

    for rule in [
        "/api/health",
        "/api/categories",
        "/api/checkins",
        "/api/auth/user",
        "/api/analytics",
        "/api/settings",
    ]:
        registry.add(RouteInfo(rule, rule.removeprefix("/api/").replace("/", "-"), is_api=True))

    return registry


ROUTES = _build_registry()

SETTINGS_SUBPAGES = [r.rule for r in ROUTES.by_category("settings") if r.rule != "/settings"]
API_ENDPOINTS = [r.rule for r in ROUTES.api_endpoints()]

# Routes an authenticated user may land on right after login/registration
AUTHENTICATED_LANDING_RE = re.compile(r"/(dashboard|my-day|auth/onboarding)(?:[/?#]|$)")
