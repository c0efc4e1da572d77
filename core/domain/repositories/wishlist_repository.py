"""Repository interface for saved products, sellers and searches."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.wishlist import SavedProduct, SavedSearch, SavedSeller


class WishlistRepository(ABC):

    @abstractmethod
    async def find_saved_product(self, user_id: str, product_id: str) -> Optional[SavedProduct]:
        pass

    @abstractmethod
    async def list_saved_products(self, user_id: str) -> List[SavedProduct]:
        pass

    @abstractmethod
    async def find_saved_seller(self, user_id: str, seller_id: str) -> Optional[SavedSeller]:
        pass

    @abstractmethod
    async def list_saved_sellers(self, user_id: str) -> List[SavedSeller]:
        pass

    @abstractmethod
    async def list_saved_searches(self, user_id: str) -> List[SavedSearch]:
        pass

    @abstractmethod
    async def add(self, entry) -> None:
        """Persist a SavedProduct, SavedSeller or SavedSearch."""
        pass

    @abstractmethod
    async def remove(self, kind: str, entry_id: str, user_id: str) -> bool:
        """Delete one of the user's entries.

        Args:
            kind: "product", "seller" or "search"
            entry_id: Row id
            user_id: Owner; rows of other users are never deleted

        Returns:
            True if a row was deleted
        """
        pass
