import pytest

from marine_proxy.deps import _create_rate_limiter
from marine_proxy.main import app


@pytest.fixture
def anyio_backend() -> str:
    """Force anyio-based tests to run with asyncio backend only."""

    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_app_state():
    """Start every test with a fresh shared limiter and no overrides."""

    _create_rate_limiter.cache_clear()
    yield
    app.dependency_overrides.clear()
    _create_rate_limiter.cache_clear()
