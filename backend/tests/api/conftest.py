"""API test fixtures: an isolated app per test and an httpx client over ASGI.

Invariants:
    - Every test gets its own app (own store, seeded demo data)
    - Settings are built explicitly; .env and the cached get_settings() are never read

Design Decisions:
    - ASGITransport over TestClient: async tests drive the app in-process,
      no server and no thread
"""

import pytest
from httpx import ASGITransport, AsyncClient

from resultpattern.config import Settings
from resultpattern.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_format="text", log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the per-test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
