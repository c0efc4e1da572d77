"""Repository interfaces for listings, categories and reviews."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..entities.product import Category, Product
from ..entities.review import Review


class ProductRepository(ABC):
    """Abstract repository for seller listings."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Insert or update a listing."""
        pass

    @abstractmethod
    async def get(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        pass

    @abstractmethod
    async def list_active(self, limit: int = 200) -> List[Product]:
        """Active listings, newest first.

        Args:
            limit: Maximum number of listings to return
        """
        pass

    @abstractmethod
    async def list_by_seller(self, seller_id: str) -> List[Product]:
        """All of a seller's listings regardless of status, newest first."""
        pass

    @abstractmethod
    async def get_many(self, product_ids: List[str]) -> Dict[str, Product]:
        pass

    @abstractmethod
    async def increment_views(self, product_id: str) -> None:
        """Bump views_count by one without loading the row."""
        pass


class CategoryRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List[Category]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def save(self, category: Category) -> None:
        pass


class ReviewRepository(ABC):

    @abstractmethod
    async def save(self, review: Review) -> None:
        pass

    @abstractmethod
    async def list_for_product(self, product_id: str) -> List[Review]:
        """Reviews newest first."""
        pass

    @abstractmethod
    async def find(self, product_id: str, buyer_id: str) -> Optional[Review]:
        pass

    @abstractmethod
    async def ratings_for_product(self, product_id: str) -> List[int]:
        pass
