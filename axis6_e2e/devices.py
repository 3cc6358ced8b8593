"""Viewport profiles used by the responsive scenarios."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, TypedDict


class ViewportSize(TypedDict):
    """Viewport size specification."""
    width: int
    height: int


# Allowed horizontal overflow before a layout counts as broken
OVERFLOW_TOLERANCE_PX = 20

# WCAG 2.5.5 target size
MIN_TOUCH_TARGET_PX = 44

_IOS_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 16_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.0 Mobile/15E148 Safari/604.1"
)
_IPAD_UA = (
    "Mozilla/5.0 (iPad; CPU OS 16_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.0 Mobile/15E148 Safari/604.1"
)
_ANDROID_UA = (
    "Mozilla/5.0 (Linux; Android 13; SM-G991B) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)


@dataclass(frozen=True)
class DeviceProfile:
    name: str
    width: int
    height: int
    is_mobile: bool = False
    has_touch: bool = False
    user_agent: str | None = None

    @property
    def viewport(self) -> ViewportSize:
        return {"width": self.width, "height": self.height}

    @property
    def slug(self) -> str:
        return self.name.lower().replace(" ", "-")

    def context_args(self) -> Dict[str, Any]:
        """Keyword arguments for ``Browser.new_context``.

        ``is_mobile`` is a Chromium-only option; firefox rejects it, so it is
        only set when true.
        """
        args: Dict[str, Any] = {"viewport": self.viewport, "has_touch": self.has_touch}
        if self.is_mobile:
            args["is_mobile"] = True
        if self.user_agent:
            args["user_agent"] = self.user_agent
        return args

    def __str__(self) -> str:
        return f"{self.name} ({self.width}x{self.height})"


IPHONE_SE = DeviceProfile("iPhone SE", 375, 667, is_mobile=True, has_touch=True, user_agent=_IOS_UA)
IPHONE_12 = DeviceProfile("iPhone 12", 390, 844, is_mobile=True, has_touch=True, user_agent=_IOS_UA)
GALAXY_S21 = DeviceProfile("Galaxy S21", 360, 800, is_mobile=True, has_touch=True, user_agent=_ANDROID_UA)
IPAD = DeviceProfile("iPad", 768, 1024, is_mobile=True, has_touch=True, user_agent=_IPAD_UA)
DESKTOP = DeviceProfile("Desktop", 1440, 900)

MOBILE_DEVICES: Tuple[DeviceProfile, ...] = (IPHONE_SE, IPHONE_12, GALAXY_S21)
BREAKPOINTS: Tuple[DeviceProfile, ...] = (IPHONE_SE, IPHONE_12, GALAXY_S21, IPAD, DESKTOP)


def fits_viewport(content_width: float, device: DeviceProfile, tolerance: int = OVERFLOW_TOLERANCE_PX) -> bool:
    """True when ``content_width`` stays within the device width plus tolerance."""
    return content_width <= device.width + tolerance


def device_id(device: DeviceProfile) -> str:
    """pytest ``ids=`` helper."""
    return device.slug
