"""Repository interface for persisted carts."""

from abc import ABC, abstractmethod

from ..entities.cart import Cart


class CartRepository(ABC):
    """Stores one cart per user, one row per product."""

    @abstractmethod
    async def load(self, user_id: str) -> Cart:
        """Load the user's cart; an empty cart when nothing is stored.

        Args:
            user_id: Cart owner

        Returns:
            Cart with lines in the order they were added
        """
        pass

    @abstractmethod
    async def save(self, cart: Cart) -> None:
        """Replace the stored lines with the cart's current lines.

        Args:
            cart: Cart aggregate to persist
        """
        pass
