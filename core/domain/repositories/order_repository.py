"""Repository interfaces for the Order and ReturnRequest aggregates."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable, List, Optional

from ..entities.order import Order
from ..entities.return_request import ReturnRequest
from ..enums import OrderStatus, ReturnStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist order aggregate (insert or update, items included).

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def get(self, order_id: str) -> Optional[Order]:
        """Retrieve order by row id.

        Args:
            order_id: Order UUID string

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_buyer(self, buyer_id: str) -> List[Order]:
        """List a buyer's orders, newest first.

        Args:
            buyer_id: Buyer profile id

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def list_for_seller(
        self,
        seller_id: str,
        status: Optional[OrderStatus] = None,
        limit: Optional[int] = None,
    ) -> List[Order]:
        """List a seller's orders, newest first.

        Args:
            seller_id: Seller profile id
            status: Only orders in this status when given
            limit: Maximum number of orders to return

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def has_purchased(
        self,
        buyer_id: str,
        product_id: str,
        statuses: Iterable[OrderStatus],
    ) -> bool:
        """Check whether the buyer has an order line for the product.

        Args:
            buyer_id: Buyer profile id
            product_id: Product id
            statuses: Order statuses that count as a purchase

        Returns:
            True if at least one matching order item exists
        """
        pass


class CouponRepository(ABC):
    """Read-only access to checkout coupons."""

    @abstractmethod
    async def find_active_percentage(self, code: str) -> Optional[Decimal]:
        """Return the discount percentage of an active coupon, else None."""
        pass


class ReturnRepository(ABC):
    """Abstract repository for ReturnRequest aggregate persistence."""

    @abstractmethod
    async def save(self, return_request: ReturnRequest) -> None:
        pass

    @abstractmethod
    async def get(self, return_id: str) -> Optional[ReturnRequest]:
        pass

    @abstractmethod
    async def list_for_order(self, order_id: str) -> List[ReturnRequest]:
        pass

    @abstractmethod
    async def list_for_seller(
        self, seller_id: str, status: Optional[ReturnStatus] = None
    ) -> List[ReturnRequest]:
        """Returns raised against the seller's orders, newest first."""
        pass

    @abstractmethod
    async def list_for_buyer(self, buyer_id: str) -> List[ReturnRequest]:
        pass
