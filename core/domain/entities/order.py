"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from ..enums import DeliveryMode, OrderStatus, PaymentMethod, PaymentStatus
from ..events.base import DomainEvent
from ..exceptions import InvalidStateTransition, PermissionDeniedError
from ..value_objects import Money, OrderNumber, new_id


# Seller fulfilment table: each status has exactly one next status.
NEXT_ORDER_STATUS: Dict[OrderStatus, OrderStatus] = {
    OrderStatus.PENDING: OrderStatus.CONFIRMED,
    OrderStatus.CONFIRMED: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
}

# Steps shown to the buyer on the order detail page.
BUYER_TIMELINE: List[OrderStatus] = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.IN_TRANSIT,
    OrderStatus.DELIVERED,
]

_TIMELINE_ALIASES = {
    OrderStatus.PREPARING: OrderStatus.CONFIRMED,
    OrderStatus.SHIPPED: OrderStatus.IN_TRANSIT,
    OrderStatus.OUT_FOR_DELIVERY: OrderStatus.IN_TRANSIT,
}

# Orders in these statuses let the buyer review the products they bought.
REVIEWABLE_STATUSES = (
    OrderStatus.DELIVERED,
    OrderStatus.CONFIRMED,
    OrderStatus.IN_TRANSIT,
)


def next_order_status(status: str) -> Optional[OrderStatus]:
    """Look up the next fulfilment status; None for terminal or unknown."""
    try:
        return NEXT_ORDER_STATUS.get(OrderStatus(status))
    except ValueError:
        return None


def buyer_timeline_index(status: str) -> int:
    """Index of the status on the buyer timeline; -1 for cancelled."""
    try:
        current = OrderStatus(status)
    except ValueError:
        return 0
    if current == OrderStatus.CANCELLED:
        return -1
    current = _TIMELINE_ALIASES.get(current, current)
    return BUYER_TIMELINE.index(current)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class OrderItem:
    """Line item copied from the cart at checkout."""
    product_id: str
    quantity: int
    unit: str
    price_per_unit: Money
    line_total: Money
    product_snapshot: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_id)

    @property
    def title(self) -> str:
        return self.product_snapshot.get("title", "")


@dataclass
class Order:
    """
    Order aggregate root.

    One order is created per seller at checkout. Only the owning seller
    moves it along the fulfilment table or cancels it.
    """
    order_number: OrderNumber
    buyer_id: str
    seller_id: str
    subtotal: Money
    transport_fee: Money
    platform_fee: Money
    discount_amount: Money
    total_amount: Money
    delivery_mode: DeliveryMode
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    delivery_address_id: Optional[str] = None
    delivery_date: Optional[date] = None
    delivery_slot: Optional[str] = None
    notes: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)
    cancelled_at: Optional[datetime] = None

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def place(cls, **kwargs) -> "Order":
        """Create a new pending order and record OrderPlacedEvent."""
        from ..events.order_events import OrderPlacedEvent

        order = cls(**kwargs)
        order._record_event(
            OrderPlacedEvent(
                order_id=order.id,
                order_number=str(order.order_number),
                buyer_id=order.buyer_id,
                seller_id=order.seller_id,
                total_amount=order.total_amount.amount,
                payment_method=order.payment_method.value,
                user_id=order.buyer_id,
            )
        )
        return order

    def ensure_seller(self, seller_id: str) -> None:
        if self.seller_id != seller_id:
            raise PermissionDeniedError("Only the seller of this order can change it")

    @property
    def next_status(self) -> Optional[OrderStatus]:
        return NEXT_ORDER_STATUS.get(self.status)

    def advance(self) -> OrderStatus:
        """
        Move the order one step along the fulfilment table.

        Raises:
            InvalidStateTransition: if the order is delivered, cancelled
                or otherwise has no next status
        """
        nxt = self.next_status
        if nxt is None:
            raise InvalidStateTransition("order", self.status.value, "advance")

        previous = self.status
        self.status = nxt
        self._record_status_change(previous, nxt)
        return nxt

    def cancel(self, reason: Optional[str] = None) -> None:
        """Business rule: delivered and cancelled orders stay as they are."""
        if self.status in (OrderStatus.DELIVERED, OrderStatus.CANCELLED):
            raise InvalidStateTransition("order", self.status.value, "cancel")

        from ..events.order_events import OrderCancelledEvent

        previous = self.status
        self.status = OrderStatus.CANCELLED
        self.cancelled_at = _utcnow()
        self._record_event(
            OrderCancelledEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                previous_status=previous.value,
                reason=reason,
                user_id=self.seller_id,
            )
        )

    def timeline_index(self) -> int:
        return buyer_timeline_index(self.status.value)

    def contains_item(self, order_item_id: str) -> Optional[OrderItem]:
        for item in self.items:
            if item.id == order_item_id:
                return item
        return None

    def _record_status_change(self, previous: OrderStatus, new: OrderStatus) -> None:
        from ..events.order_events import OrderStatusChangedEvent

        self._record_event(
            OrderStatusChangedEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                previous_status=previous.value,
                new_status=new.value,
                user_id=self.seller_id,
            )
        )

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()
