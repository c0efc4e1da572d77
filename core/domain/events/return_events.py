"""Return request domain events."""
from dataclasses import dataclass

from .base import DomainEvent


@dataclass
class ReturnRequestedEvent(DomainEvent):
    """Buyer asked to return items from a delivered order."""

    return_id: str = ""
    order_id: str = ""
    buyer_id: str = ""
    seller_id: str = ""
    reason: str = ""
    item_count: int = 0

    def __post_init__(self):
        """Set aggregate_id to return_id."""
        if not self.aggregate_id and self.return_id:
            object.__setattr__(self, 'aggregate_id', self.return_id)
        super().__post_init__()


@dataclass
class ReturnStatusChangedEvent(DomainEvent):
    """Seller approved, scheduled, refunded or rejected a return."""

    return_id: str = ""
    order_id: str = ""
    previous_status: str = ""
    new_status: str = ""

    def __post_init__(self):
        if not self.aggregate_id and self.return_id:
            object.__setattr__(self, 'aggregate_id', self.return_id)
        super().__post_init__()
