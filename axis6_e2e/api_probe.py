"""HTTP liveness probing of API endpoints and security headers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

import anyio
import httpx

logger = logging.getLogger(__name__)

SECURITY_HEADERS: Dict[str, Optional[str]] = {
    "strict-transport-security": None,
    "content-security-policy": None,
    "x-frame-options": None,
    "x-content-type-options": "nosniff",
    "referrer-policy": None,
}


@dataclass
class EndpointResult:
    path: str
    status: int  # 0 when the request never got a response
    elapsed_ms: float = 0.0
    error: str = ""

    @property
    def ok(self) -> bool:
        """Any response below 500; 4xx is expected for unauthenticated calls."""
        return 0 < self.status < 500


async def probe_endpoint(client: httpx.AsyncClient, path: str) -> EndpointResult:
    started = anyio.current_time()
    try:
        response = await client.get(path)
    except httpx.HTTPError as exc:
        logger.warning("GET %s failed: %s", path, exc)
        return EndpointResult(path=path, status=0, error=f"{type(exc).__name__}: {exc}")
    elapsed = (anyio.current_time() - started) * 1000
    logger.debug("GET %s -> %s (%.0f ms)", path, response.status_code, elapsed)
    return EndpointResult(path=path, status=response.status_code, elapsed_ms=elapsed)


async def probe_endpoints(
    base_url: str,
    endpoints: Iterable[str],
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 10.0,
) -> List[EndpointResult]:
    """GET every endpoint sequentially and report its status."""
    if client is not None:
        return [await probe_endpoint(client, path) for path in endpoints]
    async with httpx.AsyncClient(base_url=base_url, timeout=timeout, follow_redirects=False) as owned:
        return [await probe_endpoint(owned, path) for path in endpoints]


async def is_reachable(base_url: str, timeout: float = 5.0) -> bool:
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(base_url)
    except httpx.HTTPError:
        return False
    return response.status_code < 500


def missing_security_headers(headers: Mapping[str, str]) -> List[str]:
    """Names of expected security headers that are absent or have the wrong value."""
    lowered = {k.lower(): v for k, v in headers.items()}
    missing = []
    for name, expected in SECURITY_HEADERS.items():
        value = lowered.get(name)
        if value is None or (expected is not None and value.strip().lower() != expected):
            missing.append(name)
    return missing
