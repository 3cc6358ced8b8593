"""Basic accessibility audit run in the page context."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from axis6_e2e.browser import Browser
from axis6_e2e.devices import MIN_TOUCH_TARGET_PX

_AUDIT_JS = """
() => {
    const visible = el => !!(el.offsetWidth || el.offsetHeight || el.getClientRects().length);
    const labelled = el => {
        if (el.getAttribute('aria-label') || el.getAttribute('aria-labelledby')) return true;
        if (el.id && document.querySelector(`label[for="${el.id}"]`)) return true;
        if (el.closest('label')) return true;
        return !!el.getAttribute('placeholder');
    };
    const inputs = [...document.querySelectorAll('input:not([type=hidden]), select, textarea')].filter(visible);
    const buttons = [...document.querySelectorAll('button, [role=button]')].filter(visible);
    return {
        lang: document.documentElement.getAttribute('lang') || '',
        title: document.title || '',
        headings: document.querySelectorAll('h1, h2, h3').length,
        imagesWithoutAlt: [...document.querySelectorAll('img:not([alt])')].filter(visible).map(i => i.src),
        unlabeledInputs: inputs.filter(i => !labelled(i)).map(i => i.name || i.id || i.type),
        unlabeledButtons: buttons.filter(b => !(b.textContent || '').trim() && !b.getAttribute('aria-label')
            && !b.getAttribute('aria-labelledby') && !b.getAttribute('title')).length,
    };
}
"""

_TOUCH_TARGETS_JS = """
(minSize) => [...document.querySelectorAll('button, a[href], [role=button], input[type=checkbox]')]
    .filter(el => el.offsetWidth || el.offsetHeight)
    .map(el => {
        const r = el.getBoundingClientRect();
        return {label: (el.getAttribute('aria-label') || el.textContent || el.tagName).trim().slice(0, 40),
                width: Math.round(r.width), height: Math.round(r.height)};
    })
    .filter(t => t.width > 0 && t.height > 0 && (t.width < minSize || t.height < minSize))
"""


@dataclass
class AccessibilityReport:
    lang: str = ""
    title: str = ""
    headings: int = 0
    images_without_alt: List[str] = field(default_factory=list)
    unlabeled_inputs: List[str] = field(default_factory=list)
    unlabeled_buttons: int = 0

    @classmethod
    def from_audit(cls, data: Mapping[str, Any]) -> "AccessibilityReport":
        return cls(
            lang=data.get("lang", ""),
            title=data.get("title", ""),
            headings=int(data.get("headings", 0)),
            images_without_alt=list(data.get("imagesWithoutAlt", [])),
            unlabeled_inputs=list(data.get("unlabeledInputs", [])),
            unlabeled_buttons=int(data.get("unlabeledButtons", 0)),
        )

    def issues(self) -> List[str]:
        found = []
        if len(self.lang) < 2:
            found.append("<html> has no lang attribute")
        if not self.title:
            found.append("page has no title")
        if self.headings == 0:
            found.append("page has no headings")
        if self.images_without_alt:
            found.append(f"{len(self.images_without_alt)} image(s) without alt")
        if self.unlabeled_inputs:
            found.append(f"unlabeled inputs: {', '.join(self.unlabeled_inputs)}")
        if self.unlabeled_buttons:
            found.append(f"{self.unlabeled_buttons} button(s) without accessible name")
        return found


async def audit_page(browser: Browser) -> AccessibilityReport:
    return AccessibilityReport.from_audit(await browser.evaluate(_AUDIT_JS))


async def small_touch_targets(browser: Browser, min_size: int = MIN_TOUCH_TARGET_PX) -> List[Dict[str, Any]]:
    """Interactive elements smaller than ``min_size`` in either dimension."""
    return await browser.evaluate(_TOUCH_TARGETS_JS, min_size)
