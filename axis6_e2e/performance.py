"""Navigation timing and bundle-size measurements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from axis6_e2e.browser import Browser

# Targets in milliseconds / bytes
LOAD_TARGET_MS = 3000
DOM_READY_TARGET_MS = 2000
FULL_LOAD_TARGET_MS = 5000
BUNDLE_TARGET_BYTES = 1024 * 1024

_NAVIGATION_TIMING_JS = """
() => {
    const nav = performance.getEntriesByType('navigation')[0];
    const paints = {};
    for (const p of performance.getEntriesByType('paint')) { paints[p.name] = p.startTime; }
    if (!nav) { return null; }
    return {
        ttfb: nav.responseStart - nav.requestStart,
        domContentLoaded: nav.domContentLoadedEventEnd - nav.startTime,
        load: nav.loadEventEnd - nav.startTime,
        firstPaint: paints['first-paint'] || 0,
        firstContentfulPaint: paints['first-contentful-paint'] || 0,
    };
}
"""

_RESOURCES_JS = """
() => performance.getEntriesByType('resource').map(r => ({
    name: r.name,
    type: r.initiatorType,
    transferSize: r.transferSize || 0,
    duration: r.duration,
}))
"""


@dataclass
class NavigationTiming:
    ttfb: float = 0.0
    dom_content_loaded: float = 0.0
    load: float = 0.0
    first_paint: float = 0.0
    first_contentful_paint: float = 0.0

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any] | None) -> "NavigationTiming":
        if not entry:
            return cls()
        return cls(
            ttfb=float(entry.get("ttfb") or 0),
            dom_content_loaded=float(entry.get("domContentLoaded") or 0),
            load=float(entry.get("load") or 0),
            first_paint=float(entry.get("firstPaint") or 0),
            first_contentful_paint=float(entry.get("firstContentfulPaint") or 0),
        )

    def budget_violations(
        self,
        dom_ready_ms: float = DOM_READY_TARGET_MS,
        full_load_ms: float = FULL_LOAD_TARGET_MS,
    ) -> List[str]:
        violations = []
        if self.dom_content_loaded > dom_ready_ms:
            violations.append(f"DOMContentLoaded {self.dom_content_loaded:.0f} ms > {dom_ready_ms} ms")
        if self.load > full_load_ms:
            violations.append(f"load {self.load:.0f} ms > {full_load_ms} ms")
        return violations

    def as_dict(self) -> Dict[str, float]:
        return {
            "ttfb_ms": round(self.ttfb),
            "dom_content_loaded_ms": round(self.dom_content_loaded),
            "load_ms": round(self.load),
            "first_paint_ms": round(self.first_paint),
            "first_contentful_paint_ms": round(self.first_contentful_paint),
        }


async def navigation_timing(browser: Browser) -> NavigationTiming:
    await browser.page.wait_for_load_state("load")
    return NavigationTiming.from_entry(await browser.evaluate(_NAVIGATION_TIMING_JS))


async def resource_entries(browser: Browser) -> List[Dict[str, Any]]:
    return await browser.evaluate(_RESOURCES_JS)


def oversized_scripts(resources: List[Mapping[str, Any]], limit: int = BUNDLE_TARGET_BYTES) -> List[str]:
    """Script resources whose transfer size exceeds ``limit``."""
    return [
        f"{r['name']} ({r['transferSize'] / 1024:.0f} KiB)"
        for r in resources
        if r.get("type") == "script" and r.get("transferSize", 0) > limit
    ]
