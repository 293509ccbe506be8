import pytest
from fastapi.testclient import TestClient

from weightconv.main import app
from weightconv.ratelimit import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Each test starts with fresh per-client counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
