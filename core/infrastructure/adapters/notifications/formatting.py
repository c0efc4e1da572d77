"""Human-readable one-liners for published domain events."""
from typing import Tuple

from core.domain.events.base import DomainEvent

_TEMPLATES = {
    "OrderPlacedEvent": ("🛒 New order {order_number} ({total_amount} INR, {payment_method})", 40),
    "OrderStatusChangedEvent": ("📦 Order {order_number}: {previous_status} → {new_status}", 30),
    "OrderCancelledEvent": ("🚫 Order {order_number} cancelled (was {previous_status})", 60),
    "ReturnRequestedEvent": ("↩️ Return requested for order {order_id}: {reason} ({item_count} items)", 60),
    "ReturnStatusChangedEvent": ("↩️ Return {return_id}: {previous_status} → {new_status}", 40),
}


def describe_event(event: DomainEvent) -> Tuple[str, int]:
    """Return (message, severity) for an event; unknown events get a generic line."""
    template = _TEMPLATES.get(event.event_type)
    data = event.to_dict()["data"]
    if template is None:
        return f"{event.event_type} ({event.aggregate_id})", 20
    text, severity = template
    return text.format(**data), severity
