"""Shared fixtures: in-memory database, event bus, adapters and seed helpers."""

from decimal import Decimal
from typing import Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from core.data.models import CouponModel
from core.data.uow import create_uow
from core.domain.entities.product import Category, Product
from core.domain.entities.profile import Address, Profile
from core.domain.enums import ListingStatus, ProduceUnit, UserRole
from core.domain.value_objects import new_id
from core.infrastructure.adapters.memory import InMemoryStorageClient, StaticTokenAuthProvider
from core.infrastructure.adapters.notifications.mock_notification_service import MockNotificationService
from core.infrastructure.database.config import get_session_factory, init_database
from core.infrastructure.event_bus import InMemoryEventBus, notification_subscriber


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    await init_database(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return get_session_factory(test_engine)


@pytest.fixture
def notifications() -> MockNotificationService:
    return MockNotificationService()


@pytest.fixture
def event_bus(notifications) -> InMemoryEventBus:
    """Event bus forwarding every event to the mock notification service."""
    bus = InMemoryEventBus()
    bus.subscribe(notification_subscriber(notifications))
    return bus


@pytest.fixture
def storage() -> InMemoryStorageClient:
    return InMemoryStorageClient()


@pytest.fixture
def auth_provider() -> StaticTokenAuthProvider:
    return StaticTokenAuthProvider()


class Seeder:
    """Writes fixture rows through the repositories."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    async def profile(
        self,
        user_id: Optional[str] = None,
        role: UserRole = UserRole.BUYER,
        full_name: str = "Test User",
        **kwargs,
    ) -> Profile:
        profile = Profile(id=user_id or new_id(), role=role, full_name=full_name, **kwargs)
        async with create_uow(self._session_factory) as uow:
            await uow.profiles.save(profile)
            await uow.commit()
        return profile

    async def category(self, name: str = "Vegetables", slug: str = "vegetables") -> Category:
        category = Category(name=name, slug=slug)
        async with create_uow(self._session_factory) as uow:
            await uow.categories.save(category)
            await uow.commit()
        return category

    async def product(
        self,
        seller_id: str,
        title: str = "Tomatoes",
        price: str = "40",
        quantity: int = 100,
        **kwargs,
    ) -> Product:
        kwargs.setdefault("unit", ProduceUnit.KG)
        kwargs.setdefault("status", ListingStatus.ACTIVE)
        product = Product(
            seller_id=seller_id,
            title=title,
            price_per_unit=Decimal(price),
            quantity_available=quantity,
            **kwargs,
        )
        async with create_uow(self._session_factory) as uow:
            await uow.products.save(product)
            await uow.commit()
        return product

    async def address(self, user_id: str, **kwargs) -> Address:
        fields = dict(
            label="Home",
            full_name="Asha Buyer",
            phone="9876543210",
            street="12 Market Road",
            city="Nashik",
            pincode="422001",
            latitude=19.99,
            longitude=73.78,
        )
        fields.update(kwargs)
        address = Address(user_id=user_id, **fields)
        async with create_uow(self._session_factory) as uow:
            await uow.addresses.save(address)
            await uow.commit()
        return address

    async def coupon(self, code: str, percentage: str, active: bool = True) -> None:
        async with self._session_factory() as session:
            session.add(
                CouponModel(
                    id=new_id(),
                    code=code,
                    discount_percentage=Decimal(percentage),
                    is_active=active,
                )
            )
            await session.commit()


@pytest.fixture
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)
