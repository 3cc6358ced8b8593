"""Device profiles, overflow tolerance and the route registry."""

from __future__ import annotations

import pytest

from axis6_e2e.devices import BREAKPOINTS, DESKTOP, IPHONE_SE, fits_viewport
from axis6_e2e.routes import API_ENDPOINTS, AUTHENTICATED_LANDING_RE, ROUTES, SETTINGS_SUBPAGES


def test_declared_breakpoints():
    assert [(d.width, d.height) for d in BREAKPOINTS] == [
        (375, 667),
        (390, 844),
        (360, 800),
        (768, 1024),
        (1440, 900),
    ]


@pytest.mark.parametrize("width,expected", [(375, True), (395, True), (396, False)])
def test_overflow_tolerance(width, expected):
    assert fits_viewport(width, IPHONE_SE) is expected


def test_desktop_context_args_skip_is_mobile():
    assert "is_mobile" not in DESKTOP.context_args()
    assert IPHONE_SE.context_args()["is_mobile"] is True
    assert IPHONE_SE.context_args()["viewport"] == {"width": 375, "height": 667}


def test_api_endpoints():
    assert API_ENDPOINTS == [
        "/api/health",
        "/api/categories",
        "/api/checkins",
        "/api/auth/user",
        "/api/analytics",
        "/api/settings",
    ]


def test_settings_subpages():
    assert SETTINGS_SUBPAGES == [
        "/settings/account",
        "/settings/privacy",
        "/settings/security",
        "/settings/notifications",
        "/settings/focus",
        "/settings/axis-customization",
    ]


def test_route_categories():
    assert ROUTES.get("/auth/login").category == "auth"
    assert ROUTES.get("/dashboard").category == "app"
    assert ROUTES.get("/privacy").category == "public"
    assert ROUTES.get("/api/health").category == "api"


def test_parametrized_route():
    room = ROUTES.get("/chat/:id")
    assert room.has_params
    assert room not in ROUTES.static_pages()
    assert room.build(id="abc") == "/chat/abc"
    with pytest.raises(ValueError):
        room.build()


def test_public_pages_need_no_auth():
    assert all(not r.auth_required for r in ROUTES.public_pages())
    assert "/" in [r.rule for r in ROUTES.public_pages()]


def test_unknown_route():
    with pytest.raises(KeyError):
        ROUTES.get("/nope")


@pytest.mark.parametrize(
    "url,matches",
    [
        ("https://axis6.app/dashboard", True),
        ("https://axis6.app/auth/onboarding?step=1", True),
        ("https://axis6.app/my-day", True),
        ("https://axis6.app/auth/login", False),
    ],
)
def test_authenticated_landing(url, matches):
    assert bool(AUTHENTICATED_LANDING_RE.search(url)) is matches
