"""SQLAlchemy implementation of WishlistRepository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.wishlist import SavedProduct, SavedSearch, SavedSeller
from core.domain.repositories.wishlist_repository import WishlistRepository

from ..models.wishlist_model import SavedProductModel, SavedSearchModel, SavedSellerModel

_MODELS = {
    "product": SavedProductModel,
    "seller": SavedSellerModel,
    "search": SavedSearchModel,
}


class SqlAlchemyWishlistRepository(WishlistRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_saved_product(self, user_id: str, product_id: str) -> Optional[SavedProduct]:
        result = await self._session.execute(
            select(SavedProductModel).where(
                SavedProductModel.user_id == user_id,
                SavedProductModel.product_id == product_id,
            )
        )
        m = result.scalar_one_or_none()
        if m is None:
            return None
        return SavedProduct(id=m.id, user_id=m.user_id, product_id=m.product_id, created_at=m.created_at)

    async def list_saved_products(self, user_id: str) -> List[SavedProduct]:
        result = await self._session.execute(
            select(SavedProductModel)
            .where(SavedProductModel.user_id == user_id)
            .order_by(SavedProductModel.created_at.desc())
        )
        return [
            SavedProduct(id=m.id, user_id=m.user_id, product_id=m.product_id, created_at=m.created_at)
            for m in result.scalars().all()
        ]

    async def find_saved_seller(self, user_id: str, seller_id: str) -> Optional[SavedSeller]:
        result = await self._session.execute(
            select(SavedSellerModel).where(
                SavedSellerModel.user_id == user_id,
                SavedSellerModel.seller_id == seller_id,
            )
        )
        m = result.scalar_one_or_none()
        if m is None:
            return None
        return SavedSeller(id=m.id, user_id=m.user_id, seller_id=m.seller_id, created_at=m.created_at)

    async def list_saved_sellers(self, user_id: str) -> List[SavedSeller]:
        result = await self._session.execute(
            select(SavedSellerModel)
            .where(SavedSellerModel.user_id == user_id)
            .order_by(SavedSellerModel.created_at.desc())
        )
        return [
            SavedSeller(id=m.id, user_id=m.user_id, seller_id=m.seller_id, created_at=m.created_at)
            for m in result.scalars().all()
        ]

    async def list_saved_searches(self, user_id: str) -> List[SavedSearch]:
        result = await self._session.execute(
            select(SavedSearchModel)
            .where(SavedSearchModel.user_id == user_id)
            .order_by(SavedSearchModel.created_at.desc())
        )
        return [
            SavedSearch(
                id=m.id, user_id=m.user_id, query=m.query,
                filters=dict(m.filters or {}), created_at=m.created_at,
            )
            for m in result.scalars().all()
        ]

    async def add(self, entry) -> None:
        if isinstance(entry, SavedProduct):
            model = SavedProductModel(
                id=entry.id, user_id=entry.user_id, product_id=entry.product_id, created_at=entry.created_at
            )
        elif isinstance(entry, SavedSeller):
            model = SavedSellerModel(
                id=entry.id, user_id=entry.user_id, seller_id=entry.seller_id, created_at=entry.created_at
            )
        elif isinstance(entry, SavedSearch):
            model = SavedSearchModel(
                id=entry.id, user_id=entry.user_id, query=entry.query,
                filters=dict(entry.filters), created_at=entry.created_at,
            )
        else:
            raise TypeError(f"Unsupported wishlist entry: {type(entry).__name__}")
        self._session.add(model)
        await self._session.flush()

    async def remove(self, kind: str, entry_id: str, user_id: str) -> bool:
        model = _MODELS.get(kind)
        if model is None:
            raise ValueError(f"Unknown wishlist kind: {kind}")
        result = await self._session.execute(
            delete(model).where(model.id == entry_id, model.user_id == user_id)
        )
        return (result.rowcount or 0) > 0
