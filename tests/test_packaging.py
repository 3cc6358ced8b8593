"""Requirement floors match the pytest configuration they support."""

from __future__ import annotations

import configparser
import re
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _floor(requirement: str) -> tuple:
    for line in (ROOT / "requirements.txt").read_text(encoding="utf-8").splitlines():
        match = re.match(rf"^{re.escape(requirement)}>=([\d.]+)", line.strip())
        if match:
            return tuple(int(part) for part in match.group(1).split("."))
    raise AssertionError(f"{requirement} has no lower bound in requirements.txt")


def test_fixture_loop_scope_option_is_supported_by_asyncio_floor():
    config = configparser.ConfigParser()
    config.read(ROOT / "pytest.ini", encoding="utf-8")
    assert config.get("pytest", "asyncio_default_fixture_loop_scope") == "function"
    # the option first shipped in pytest-asyncio 0.24
    assert _floor("pytest-asyncio") >= (0, 24)


def test_markers_are_registered():
    config = configparser.ConfigParser()
    config.read(ROOT / "pytest.ini", encoding="utf-8")
    markers = config.get("pytest", "markers")
    for name in ("probe", "mutates", "production"):
        assert re.search(rf"^{name}:", markers, re.MULTILINE)
