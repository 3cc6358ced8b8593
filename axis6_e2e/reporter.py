"""Structured outcome reporting for probes and scenarios.

Scenarios receive a ``Reporter`` through the ``reporter`` fixture instead of
printing. Every check is logged as one ✅/❌ line and kept for the summary
and the optional JSON report.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    label: str
    passed: bool
    detail: str = ""
    scope: str = ""

    def line(self) -> str:
        marker = "✅" if self.passed else "❌"
        text = f"{marker} {self.label}"
        if self.detail:
            text += f" - {self.detail}"
        return text


@dataclass
class Reporter:
    """Collects check outcomes and metrics for one scenario or probe run."""

    name: str
    results: List[CheckResult] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
    _scope: str = ""

    def scope(self, scope: str) -> "Reporter":
        """Prefix subsequent checks with ``scope`` (e.g. a route or device)."""
        self._scope = scope
        return self

    def check(self, label: str, condition: bool, detail: str = "") -> bool:
        """Record a soft check and return ``condition`` unchanged."""
        result = CheckResult(label=label, passed=bool(condition), detail=detail, scope=self._scope)
        self.results.append(result)
        prefix = f"[{self._scope}] " if self._scope else ""
        if result.passed:
            logger.info("%s%s", prefix, result.line())
        else:
            logger.warning("%s%s", prefix, result.line())
        return result.passed

    def note(self, key: str, value: Any) -> None:
        """Record a metric (timings, counts) without pass/fail semantics."""
        self.metrics[key] = value
        logger.info("📊 %s: %s", key, value)

    @property
    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]

    @property
    def passed(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        total = len(self.results)
        failed = len(self.failures)
        return f"{self.name}: {total - failed}/{total} checks passed"

    def assert_all(self) -> None:
        """Turn recorded soft checks into a hard failure."""
        if self.failures:
            lines = "\n".join(r.line() for r in self.failures)
            raise AssertionError(f"{self.summary()}\n{lines}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "passed": self.passed,
            "summary": self.summary(),
            "checks": [asdict(r) for r in self.results],
            "metrics": self.metrics,
        }

    def write_json(self, path: Path | str, extra: Optional[Dict[str, Any]] = None) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = self.to_dict()
        if extra:
            payload.update(extra)
        path.write_text(json.dumps(payload, indent=2, default=str))
        logger.info("Report written to %s", path)
        return path
