"""
Order Domain Events.

Recorded by the Order aggregate and published after checkout or a
seller status change has been committed.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderPlacedEvent(DomainEvent):
    """
    Buyer placed an order with one seller.

    Trigger: checkout (one event per seller group)
    Consumers: notification subscriber
    """

    order_id: str = ""
    order_number: str = ""
    buyer_id: str = ""
    seller_id: str = ""
    total_amount: Decimal = Decimal("0")
    payment_method: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass
class OrderStatusChangedEvent(DomainEvent):
    """Seller moved an order one step along the fulfilment table."""

    order_id: str = ""
    order_number: str = ""
    previous_status: str = ""
    new_status: str = ""

    def __post_init__(self):
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass
class OrderCancelledEvent(DomainEvent):
    order_id: str = ""
    order_number: str = ""
    previous_status: str = ""
    reason: Optional[str] = None

    def __post_init__(self):
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()
