"""SQLAlchemy implementations of the catalog repositories."""

from typing import Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.product import Category, Product
from core.domain.entities.review import Review
from core.domain.enums import ListingStatus
from core.domain.repositories.catalog_repository import (
    CategoryRepository,
    ProductRepository,
    ReviewRepository,
)

from ..mappers import CategoryMapper, ProductMapper, ReviewMapper
from ..models.catalog_model import CategoryModel, ProductModel, ReviewModel


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, product: Product) -> None:
        existing = await self._session.get(ProductModel, product.id)
        if existing:
            ProductMapper.update_persistence(product, existing)
            self._session.add(existing)
        else:
            self._session.add(ProductMapper.to_persistence(product))
        await self._session.flush()

    async def get(self, product_id: str) -> Optional[Product]:
        model = await self._session.get(ProductModel, product_id)
        return ProductMapper.to_domain(model) if model else None

    async def delete(self, product_id: str) -> None:
        await self._session.execute(delete(ProductModel).where(ProductModel.id == product_id))

    async def list_active(self, limit: int = 200) -> List[Product]:
        result = await self._session.execute(
            select(ProductModel)
            .where(ProductModel.status == ListingStatus.ACTIVE.value)
            .order_by(ProductModel.created_at.desc())
            .limit(limit)
        )
        return [ProductMapper.to_domain(m) for m in result.scalars().all()]

    async def list_by_seller(self, seller_id: str) -> List[Product]:
        result = await self._session.execute(
            select(ProductModel)
            .where(ProductModel.seller_id == seller_id)
            .order_by(ProductModel.created_at.desc())
        )
        return [ProductMapper.to_domain(m) for m in result.scalars().all()]

    async def get_many(self, product_ids: List[str]) -> Dict[str, Product]:
        if not product_ids:
            return {}
        result = await self._session.execute(
            select(ProductModel).where(ProductModel.id.in_(list(product_ids)))
        )
        return {m.id: ProductMapper.to_domain(m) for m in result.scalars().all()}

    async def increment_views(self, product_id: str) -> None:
        await self._session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(views_count=ProductModel.views_count + 1)
        )


class SqlAlchemyCategoryRepository(CategoryRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> List[Category]:
        result = await self._session.execute(select(CategoryModel).order_by(CategoryModel.name))
        return [CategoryMapper.to_domain(m) for m in result.scalars().all()]

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        result = await self._session.execute(
            select(CategoryModel).where(CategoryModel.slug == slug)
        )
        model = result.scalar_one_or_none()
        return CategoryMapper.to_domain(model) if model else None

    async def save(self, category: Category) -> None:
        self._session.add(CategoryMapper.to_persistence(category))
        await self._session.flush()


class SqlAlchemyReviewRepository(ReviewRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, review: Review) -> None:
        self._session.add(ReviewMapper.to_persistence(review))
        await self._session.flush()

    async def list_for_product(self, product_id: str) -> List[Review]:
        result = await self._session.execute(
            select(ReviewModel)
            .where(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc())
        )
        return [ReviewMapper.to_domain(m) for m in result.scalars().all()]

    async def find(self, product_id: str, buyer_id: str) -> Optional[Review]:
        result = await self._session.execute(
            select(ReviewModel).where(
                ReviewModel.product_id == product_id,
                ReviewModel.buyer_id == buyer_id,
            )
        )
        model = result.scalar_one_or_none()
        return ReviewMapper.to_domain(model) if model else None

    async def ratings_for_product(self, product_id: str) -> List[int]:
        result = await self._session.execute(
            select(ReviewModel.rating).where(ReviewModel.product_id == product_id)
        )
        return [r for r in result.scalars().all()]
