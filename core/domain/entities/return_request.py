"""
Return request aggregate.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..enums import RefundMethod, ReturnReason, ReturnStatus
from ..events.base import DomainEvent
from ..exceptions import InvalidStateTransition, PermissionDeniedError
from ..value_objects import new_id


NEXT_RETURN_STATUS: Dict[ReturnStatus, ReturnStatus] = {
    ReturnStatus.PENDING: ReturnStatus.APPROVED,
    ReturnStatus.APPROVED: ReturnStatus.PICKUP_SCHEDULED,
    ReturnStatus.PICKUP_SCHEDULED: ReturnStatus.REFUNDED,
}

RETURN_TIMELINE: List[ReturnStatus] = [
    ReturnStatus.PENDING,
    ReturnStatus.APPROVED,
    ReturnStatus.PICKUP_SCHEDULED,
    ReturnStatus.REFUNDED,
]

TERMINAL_RETURN_STATUSES = (ReturnStatus.REFUNDED, ReturnStatus.REJECTED)

REASON_LABELS: Dict[ReturnReason, str] = {
    ReturnReason.QUALITY_ISSUE: "Quality Issue",
    ReturnReason.WRONG_ITEM: "Wrong Item",
    ReturnReason.LESS_QUANTITY: "Less Quantity",
    ReturnReason.CHANGED_MIND: "Changed Mind",
}

ENABLED_REFUND_METHODS = (RefundMethod.ORIGINAL_PAYMENT,)


def next_return_status(status: str) -> Optional[ReturnStatus]:
    try:
        return NEXT_RETURN_STATUS.get(ReturnStatus(status))
    except ValueError:
        return None


def return_timeline_index(status: str) -> int:
    """Position on the return timeline; -1 when rejected, 0 when unknown."""
    try:
        current = ReturnStatus(status)
    except ValueError:
        return 0
    if current == ReturnStatus.REJECTED:
        return -1
    return RETURN_TIMELINE.index(current)


@dataclass
class ReturnItem:
    order_item_id: str
    quantity: int
    id: str = field(default_factory=new_id)


@dataclass
class ReturnPhoto:
    photo_url: str
    id: str = field(default_factory=new_id)


@dataclass
class ReturnRequest:
    """Buyer request to return part of a delivered order."""
    order_id: str
    user_id: str
    seller_id: str
    reason: ReturnReason
    refund_method: RefundMethod = RefundMethod.ORIGINAL_PAYMENT
    description: Optional[str] = None
    status: ReturnStatus = ReturnStatus.PENDING
    items: List[ReturnItem] = field(default_factory=list)
    photos: List[ReturnPhoto] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def request(cls, **kwargs) -> "ReturnRequest":
        """Open a pending return and record ReturnRequestedEvent."""
        from ..events.return_events import ReturnRequestedEvent

        if not kwargs.get("items"):
            raise ValueError("Select at least one item to return")
        if kwargs.get("refund_method", RefundMethod.ORIGINAL_PAYMENT) not in ENABLED_REFUND_METHODS:
            raise ValueError("Refund method is not available")

        ret = cls(**kwargs)
        ret._domain_events.append(
            ReturnRequestedEvent(
                return_id=ret.id,
                order_id=ret.order_id,
                buyer_id=ret.user_id,
                seller_id=ret.seller_id,
                reason=ret.reason.value,
                item_count=len(ret.items),
                user_id=ret.user_id,
            )
        )
        return ret

    @property
    def reason_label(self) -> str:
        return REASON_LABELS.get(self.reason, self.reason.value)

    def ensure_seller(self, seller_id: str) -> None:
        if self.seller_id != seller_id:
            raise PermissionDeniedError("Only the seller of this order can act on the return")

    def advance(self) -> ReturnStatus:
        nxt = NEXT_RETURN_STATUS.get(self.status)
        if nxt is None:
            raise InvalidStateTransition("return", self.status.value, "advance")
        self._change_status(nxt)
        return nxt

    def reject(self) -> None:
        if self.status in TERMINAL_RETURN_STATUSES:
            raise InvalidStateTransition("return", self.status.value, "reject")
        self._change_status(ReturnStatus.REJECTED)

    def timeline_index(self) -> int:
        return return_timeline_index(self.status.value)

    def _change_status(self, new: ReturnStatus) -> None:
        from ..events.return_events import ReturnStatusChangedEvent

        previous = self.status
        self.status = new
        self._domain_events.append(
            ReturnStatusChangedEvent(
                return_id=self.id,
                order_id=self.order_id,
                previous_status=previous.value,
                new_status=new.value,
                user_id=self.seller_id,
            )
        )

    def get_domain_events(self) -> List[DomainEvent]:
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()
