"""API test fixtures: FastAPI app + httpx async client.

Invariants:
    - Every test gets a fresh app from create_app(), never the module-level app
    - seeded_client uses a fixed random seed so /random is reproducible
"""

import pytest
from httpx import ASGITransport, AsyncClient

from coins_api.config import Settings
from coins_api.main import create_app


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seeded_client():
    app = create_app(Settings(random_seed=1234))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
