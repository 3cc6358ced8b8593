"""API liveness: every endpoint answers below 500, authenticated or not."""
import pytest

from axis6_e2e.api_probe import probe_endpoints
from axis6_e2e.routes import API_ENDPOINTS

pytestmark = pytest.mark.asyncio


async def test_health_endpoint_below_500(live_target):
    [result] = await probe_endpoints(live_target, ["/api/health"])
    assert result.ok, f"/api/health returned {result.status or result.error}"


@pytest.mark.parametrize("path", API_ENDPOINTS)
async def test_api_endpoint_does_not_error(live_target, path):
    [result] = await probe_endpoints(live_target, [path])
    assert result.ok, f"{path} returned {result.status or result.error}"
