"""Unit tests for the ReturnRequest aggregate."""

import pytest

from core.domain.entities.return_request import (
    ReturnItem,
    ReturnRequest,
    next_return_status,
    return_timeline_index,
)
from core.domain.enums import RefundMethod, ReturnReason, ReturnStatus
from core.domain.events.return_events import ReturnRequestedEvent, ReturnStatusChangedEvent
from core.domain.exceptions import InvalidStateTransition, PermissionDeniedError


def _request(**overrides) -> ReturnRequest:
    fields = dict(
        order_id="order-1",
        user_id="buyer-1",
        seller_id="seller-1",
        reason=ReturnReason.QUALITY_ISSUE,
        items=[ReturnItem(order_item_id="item-1", quantity=2)],
    )
    fields.update(overrides)
    return ReturnRequest.request(**fields)


class TestRequest:

    def test_opens_pending_return_with_event(self):
        ret = _request()

        assert ret.status == ReturnStatus.PENDING
        assert ret.reason_label == "Quality Issue"
        event = ret.get_domain_events()[0]
        assert isinstance(event, ReturnRequestedEvent)
        assert event.item_count == 1
        assert event.seller_id == "seller-1"

    def test_requires_items(self):
        with pytest.raises(ValueError, match="at least one item"):
            _request(items=[])

    def test_wallet_refund_is_not_available(self):
        with pytest.raises(ValueError, match="Refund method"):
            _request(refund_method=RefundMethod.WALLET)


class TestTransitions:

    def test_advance_to_refunded(self):
        ret = _request()
        ret.clear_domain_events()

        assert ret.advance() == ReturnStatus.APPROVED
        assert ret.advance() == ReturnStatus.PICKUP_SCHEDULED
        assert ret.advance() == ReturnStatus.REFUNDED
        with pytest.raises(InvalidStateTransition):
            ret.advance()

        events = ret.get_domain_events()
        assert [e.new_status for e in events] == ["approved", "pickup_scheduled", "refunded"]
        assert all(isinstance(e, ReturnStatusChangedEvent) for e in events)

    def test_reject_open_return(self):
        ret = _request()
        ret.advance()
        ret.reject()
        assert ret.status == ReturnStatus.REJECTED
        assert ret.timeline_index() == -1

    @pytest.mark.parametrize("status", [ReturnStatus.REFUNDED, ReturnStatus.REJECTED])
    def test_reject_terminal_return_is_rejected(self, status):
        ret = _request()
        ret.status = status
        with pytest.raises(InvalidStateTransition):
            ret.reject()

    def test_ensure_seller(self):
        with pytest.raises(PermissionDeniedError):
            _request().ensure_seller("someone-else")


@pytest.mark.parametrize(
    "status,expected",
    [
        ("pending", ReturnStatus.APPROVED),
        ("approved", ReturnStatus.PICKUP_SCHEDULED),
        ("pickup_scheduled", ReturnStatus.REFUNDED),
        ("refunded", None),
        ("rejected", None),
        ("bogus", None),
    ],
)
def test_next_return_status(status, expected):
    assert next_return_status(status) == expected


def test_return_timeline_index():
    assert return_timeline_index("pending") == 0
    assert return_timeline_index("pickup_scheduled") == 2
    assert return_timeline_index("refunded") == 3
    assert return_timeline_index("rejected") == -1
    assert return_timeline_index("bogus") == 0
