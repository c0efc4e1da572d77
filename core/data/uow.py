"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.value_objects import ExecutionID

from .repositories import (
    SqlAlchemyAddressRepository,
    SqlAlchemyCartRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyConversationRepository,
    SqlAlchemyCouponRepository,
    SqlAlchemyFarmRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyProfileRepository,
    SqlAlchemyReturnRepository,
    SqlAlchemyReviewRepository,
    SqlAlchemyWishlistRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Propagate ExecutionID across all operations
    3. Atomic commit/rollback of all repository operations
    4. Lazy initialization of repositories
    """

    _REPOSITORIES = {
        "orders": SqlAlchemyOrderRepository,
        "coupons": SqlAlchemyCouponRepository,
        "returns": SqlAlchemyReturnRepository,
        "products": SqlAlchemyProductRepository,
        "categories": SqlAlchemyCategoryRepository,
        "reviews": SqlAlchemyReviewRepository,
        "profiles": SqlAlchemyProfileRepository,
        "addresses": SqlAlchemyAddressRepository,
        "farms": SqlAlchemyFarmRepository,
        "carts": SqlAlchemyCartRepository,
        "wishlist": SqlAlchemyWishlistRepository,
        "conversations": SqlAlchemyConversationRepository,
    }

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None
        self._repositories: dict = {}

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        self._repositories = {}
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then release the session."""
        if exc_type is not None:
            await self._session.rollback()
        await self._session.close()

    @property
    def execution_id(self) -> ExecutionID:
        """Get current execution ID for tracing."""
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    def _repository(self, name: str):
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        if name not in self._repositories:
            self._repositories[name] = self._REPOSITORIES[name](self._session)
        return self._repositories[name]

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        return self._repository("orders")

    @property
    def coupons(self) -> SqlAlchemyCouponRepository:
        return self._repository("coupons")

    @property
    def returns(self) -> SqlAlchemyReturnRepository:
        return self._repository("returns")

    @property
    def products(self) -> SqlAlchemyProductRepository:
        return self._repository("products")

    @property
    def categories(self) -> SqlAlchemyCategoryRepository:
        return self._repository("categories")

    @property
    def reviews(self) -> SqlAlchemyReviewRepository:
        return self._repository("reviews")

    @property
    def profiles(self) -> SqlAlchemyProfileRepository:
        return self._repository("profiles")

    @property
    def addresses(self) -> SqlAlchemyAddressRepository:
        return self._repository("addresses")

    @property
    def farms(self) -> SqlAlchemyFarmRepository:
        return self._repository("farms")

    @property
    def carts(self) -> SqlAlchemyCartRepository:
        return self._repository("carts")

    @property
    def wishlist(self) -> SqlAlchemyWishlistRepository:
        return self._repository("wishlist")

    @property
    def conversations(self) -> SqlAlchemyConversationRepository:
        return self._repository("conversations")

    async def commit(self) -> None:
        """Commit all pending changes."""
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        await self._session.rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
