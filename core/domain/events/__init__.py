"""Domain events for the event bus."""
from .base import DomainEvent
from .order_events import (
    OrderPlacedEvent,
    OrderStatusChangedEvent,
    OrderCancelledEvent,
)
from .return_events import (
    ReturnRequestedEvent,
    ReturnStatusChangedEvent,
)

__all__ = [
    "DomainEvent",
    "OrderPlacedEvent",
    "OrderStatusChangedEvent",
    "OrderCancelledEvent",
    "ReturnRequestedEvent",
    "ReturnStatusChangedEvent",
]
