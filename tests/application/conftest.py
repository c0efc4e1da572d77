"""Fixtures for application service tests."""

import pytest_asyncio

from market_helpers import Marketplace, build_marketplace


@pytest_asyncio.fixture
async def market(seed) -> Marketplace:
    return await build_marketplace(seed)
