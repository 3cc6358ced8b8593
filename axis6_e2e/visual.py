"""
Screenshot comparison against stored baselines.

Baseline management:
- Baselines live in axis6_e2e/baselines/<name>.png
- A missing baseline is written from the current screenshot
- UPDATE_BASELINES=1 rewrites baselines instead of comparing
- Diff and current images go to <SCREENSHOT_DIR>/diffs/
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image
from pixelmatch.contrib.PIL import pixelmatch
from playwright.async_api import Page

from axis6_e2e.config import settings

logger = logging.getLogger(__name__)

BASELINE_DIR = Path(__file__).parent / "baselines"


def diff_dir() -> Path:
    return settings.screenshot_dir / "diffs"


@dataclass
class VisualResult:
    name: str
    passed: bool
    message: str
    diff_ratio: float = 0.0
    baseline_written: bool = False


def compare_images(
    current_bytes: bytes,
    baseline_path: Path,
    diff_path: Optional[Path] = None,
    threshold: Optional[float] = None,
) -> Tuple[bool, float, str]:
    """
    Compare a PNG screenshot against a baseline file using pixelmatch.

    Returns:
        (passed, diff_ratio, message)
    """
    threshold = settings.visual_threshold if threshold is None else threshold

    if not baseline_path.exists():
        return (False, 1.0, f"Baseline not found: {baseline_path}")

    current_img = Image.open(io.BytesIO(current_bytes)).convert("RGBA")
    baseline_img = Image.open(baseline_path).convert("RGBA")

    if current_img.size != baseline_img.size:
        return (False, 1.0, f"Size mismatch: current={current_img.size}, baseline={baseline_img.size}")

    width, height = current_img.size
    diff_img = Image.new("RGBA", (width, height))
    diff_pixels = pixelmatch(baseline_img, current_img, diff_img, threshold=0.1, includeAA=True)
    diff_ratio = diff_pixels / (width * height)

    if diff_pixels > 0 and diff_path is not None:
        diff_path.parent.mkdir(parents=True, exist_ok=True)
        diff_img.save(diff_path)

    passed = diff_ratio <= threshold
    return (passed, diff_ratio, f"{diff_pixels} pixels differ ({diff_ratio:.2%})")


def save_baseline(image_bytes: bytes, baseline_path: Path) -> None:
    baseline_path.parent.mkdir(parents=True, exist_ok=True)
    baseline_path.write_bytes(image_bytes)


def check_against_baseline(
    name: str,
    screenshot_bytes: bytes,
    baseline_dir: Path = BASELINE_DIR,
    update: Optional[bool] = None,
) -> VisualResult:
    """Compare, create or update the baseline for ``name``."""
    update = settings.update_baselines if update is None else update
    baseline_path = baseline_dir / f"{name}.png"

    if update or not baseline_path.exists():
        save_baseline(screenshot_bytes, baseline_path)
        action = "updated" if update else "created"
        logger.info("Baseline %s: %s", action, baseline_path)
        return VisualResult(name, True, f"Baseline {action}: {baseline_path}", baseline_written=True)

    diff_path = diff_dir() / f"{name}_diff.png"
    passed, ratio, message = compare_images(screenshot_bytes, baseline_path, diff_path)
    if not passed:
        current_path = diff_dir() / f"{name}_current.png"
        current_path.parent.mkdir(parents=True, exist_ok=True)
        current_path.write_bytes(screenshot_bytes)
        message = f"{message}. Diff saved to {diff_path}"
    return VisualResult(name, passed, message, diff_ratio=ratio)


async def capture_and_compare(page: Page, name: str, full_page: bool = True) -> VisualResult:
    """
    Capture a screenshot and compare it against the baseline.

    Args:
        page: Playwright page object
        name: Baseline name
        full_page: Capture the whole page; use False where content height varies
    """
    screenshot_bytes = await page.screenshot(full_page=full_page, animations="disabled")
    return check_against_baseline(name, screenshot_bytes)
