"""Shared fixtures for all tests.

Database tests run against an in-memory SQLite engine; the URL is set
before the application modules are imported so the module-level engine
never tries to reach PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import app.catalog.models  # noqa: F401
import app.infrastructure.models  # noqa: F401
from app.infrastructure.database import Base


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the test database."""
    async with session_factory() as session:
        yield session


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def hoodie_payload() -> dict[str, Any]:
    """Enriched garment payload as returned by GET /api/garments/{id}."""
    return {
        "id": 1,
        "name": "Classic Hoodie",
        "sku": "HOOD-001",
        "base_price": "19.99",
        "description": None,
        "colors": [
            {"id": 10, "garment_id": 1, "name": "Black", "hex_code": "#000000"},
            {"id": 11, "garment_id": 1, "name": "Navy", "hex_code": "#1F2A44"},
        ],
        "sizes": [
            {"id": 20, "garment_id": 1, "size": "S"},
            {"id": 21, "garment_id": 1, "size": "M"},
        ],
        "designs": [
            {
                "id": 30,
                "name": "Design A",
                "image_url": "https://img.example.com/a.png",
                "thumbnail_url": "https://img.example.com/a-thumb.png",
                "price_modifier": "0.00",
                "is_active": True,
                "display_order": 1,
            },
            {
                "id": 31,
                "name": "Design B",
                "image_url": "https://img.example.com/b.png",
                "thumbnail_url": "https://img.example.com/b-thumb.png",
                "price_modifier": "5.00",
                "is_active": True,
                "display_order": 2,
            },
            {
                "id": 32,
                "name": "Retired Design",
                "image_url": "https://img.example.com/r.png",
                "thumbnail_url": None,
                "price_modifier": "1.00",
                "is_active": False,
                "display_order": 3,
            },
        ],
    }


@pytest.fixture
def discount_payload() -> dict[str, Any]:
    """Garment whose only design carries a negative modifier."""
    return {
        "id": 2,
        "name": "Crew Tee",
        "sku": "TEE-001",
        "base_price": Decimal("20.00"),
        "colors": [{"id": 40, "name": "White", "hex_code": "#FFFFFF"}],
        "sizes": [{"id": 50, "size": "L"}],
        "designs": [
            {
                "id": 60,
                "name": "Discount Design",
                "image_url": "https://img.example.com/d.png",
                "price_modifier": "-3.50",
            },
        ],
    }
