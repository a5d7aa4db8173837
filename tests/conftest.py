"""
Shared fixtures: an app wired to in-memory SQLite and an async HTTP client
talking to it in-process.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bencana_api.config import Settings
from bencana_api.infrastructure.database import init_db
from bencana_api.main import create_app

TEST_SECRET = "test-secret-key"

MERAPI = {
    "nama_gunung": "Merapi",
    "status_aktivitas": "Siaga",
    "rekomendasi": "Evacuate 5km",
    "laporan": "Increased seismicity",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite+aiosqlite://",
        DB_CREATE_TABLES=False,
        SECRET_KEY=TEST_SECRET,
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings)
    await init_db(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def registered_user(client):
    """A user that exists in the store, with the password used to create it."""
    payload = {"name": "Tester", "email": "tester@example.com", "password": "password123"}
    r = await client.post("/api/register", json=payload)
    assert r.status_code == 201, r.text
    return payload


@pytest_asyncio.fixture
async def auth_headers(client, registered_user):
    r = await client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}
