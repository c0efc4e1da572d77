"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from apps.api import deps
from apps.api.main import app
from core.domain.enums import UserRole


BUYER_TOKEN = "buyer-token"
SELLER_TOKEN = "seller-token"


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def users(seed, auth_provider):
    """A buyer and a seller with bearer tokens registered on the auth provider."""
    buyer = await seed.profile(full_name="Asha Buyer")
    seller = await seed.profile(role=UserRole.SELLER, full_name="Ravi Farms", district="Nashik")
    auth_provider.tokens[BUYER_TOKEN] = buyer.id
    auth_provider.tokens[SELLER_TOKEN] = seller.id
    return {"buyer": buyer, "seller": seller}


@pytest_asyncio.fixture
async def client(session_factory, auth_provider, storage, event_bus) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the test database and in-memory adapters."""
    app.dependency_overrides[deps.get_session_factory] = lambda: session_factory
    app.dependency_overrides[deps.get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[deps.get_storage_client] = lambda: storage
    app.dependency_overrides[deps.get_event_bus] = lambda: event_bus

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def buyer_headers() -> dict:
    return auth_headers(BUYER_TOKEN)


@pytest.fixture
def seller_headers() -> dict:
    return auth_headers(SELLER_TOKEN)
