"""API test fixtures — FastAPI app driven through httpx's ASGI transport.

Invariants:
    - dependency_overrides cleared after every test
    - small_limit_client caps operands at 8 digits via a Settings override
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def small_limit_client():
    """Client whose settings allow at most 8 digits per operand."""
    app.dependency_overrides[get_settings] = lambda: Settings(max_operand_length=8)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
