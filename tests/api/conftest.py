"""Shared fixtures for API tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.infrastructure.database import get_session
from app.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for endpoints that do not touch the database."""
    return TestClient(app)


@pytest_asyncio.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Async client whose requests run against the in-memory test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def hoodie(api_client: AsyncClient) -> dict:
    """Create a hoodie with two colors, two sizes and designs A (+0) and B (+5)."""

    async def post(url: str, body: dict) -> dict:
        response = await api_client.post(url, json=body)
        assert response.status_code == 201, response.text
        return response.json()

    garment = await post(
        "/api/garments",
        {"name": "Classic Hoodie", "sku": "HOOD-001", "base_price": "19.99"},
    )
    base = f"/api/garments/{garment['id']}"

    black = await post(f"{base}/colors", {"name": "Black", "hex_code": "#000000"})
    navy = await post(f"{base}/colors", {"name": "Navy"})
    small = await post(f"{base}/sizes", {"size": "S"})
    medium = await post(f"{base}/sizes", {"size": "M"})
    design_a = await post(
        "/api/designs",
        {"name": "Design A", "image_url": "https://img.example.com/a.png"},
    )
    design_b = await post(
        "/api/designs",
        {
            "name": "Design B",
            "image_url": "https://img.example.com/b.png",
            "thumbnail_url": "https://img.example.com/b-thumb.png",
            "price_modifier": "5.00",
        },
    )
    for position, design in enumerate((design_a, design_b), start=1):
        await post(f"{base}/designs/{design['id']}", {"display_order": position})

    return {
        "garment": garment,
        "colors": [black, navy],
        "sizes": [small, medium],
        "designs": [design_a, design_b],
    }
