"""Unit tests for the order fulfilment table and buyer timeline."""

from decimal import Decimal

import pytest

from core.domain.entities.order import (
    Order,
    OrderItem,
    buyer_timeline_index,
    next_order_status,
)
from core.domain.enums import DeliveryMode, OrderStatus, PaymentMethod, PaymentStatus
from core.domain.events.order_events import (
    OrderCancelledEvent,
    OrderPlacedEvent,
    OrderStatusChangedEvent,
)
from core.domain.exceptions import InvalidStateTransition, PermissionDeniedError
from core.domain.value_objects import Money, OrderNumber


def _order(status=OrderStatus.PENDING) -> Order:
    order = Order.place(
        order_number=OrderNumber.generate(),
        buyer_id="buyer-1",
        seller_id="seller-1",
        subtotal=Money(Decimal("200")),
        transport_fee=Money(Decimal("80")),
        platform_fee=Money(Decimal("4")),
        discount_amount=Money.zero(),
        total_amount=Money(Decimal("284")),
        delivery_mode=DeliveryMode.SELLER_DELIVERS,
        payment_method=PaymentMethod.COD,
        payment_status=PaymentStatus.PENDING,
        items=[
            OrderItem(
                product_id="p1",
                quantity=5,
                unit="kg",
                price_per_unit=Money(Decimal("40")),
                line_total=Money(Decimal("200")),
                product_snapshot={"title": "Tomatoes", "image": None},
            )
        ],
    )
    order.status = status
    order.clear_domain_events()
    return order


class TestNextStatus:

    @pytest.mark.parametrize(
        "current,expected",
        [
            ("pending", OrderStatus.CONFIRMED),
            ("confirmed", OrderStatus.PREPARING),
            ("preparing", OrderStatus.SHIPPED),
            ("shipped", OrderStatus.DELIVERED),
            ("delivered", None),
            ("cancelled", None),
            ("in_transit", None),
            ("teleported", None),
        ],
    )
    def test_lookup(self, current, expected):
        assert next_order_status(current) == expected


class TestBuyerTimeline:

    @pytest.mark.parametrize(
        "status,index",
        [
            ("pending", 0),
            ("confirmed", 1),
            ("preparing", 1),
            ("shipped", 2),
            ("out_for_delivery", 2),
            ("in_transit", 2),
            ("delivered", 3),
            ("cancelled", -1),
            ("unknown", 0),
        ],
    )
    def test_index(self, status, index):
        assert buyer_timeline_index(status) == index


class TestOrderAggregate:

    def test_place_records_event(self):
        order = Order.place(
            order_number=OrderNumber("ORD-123456-AB12"),
            buyer_id="b",
            seller_id="s",
            subtotal=Money.zero(),
            transport_fee=Money.zero(),
            platform_fee=Money.zero(),
            discount_amount=Money.zero(),
            total_amount=Money(Decimal("10")),
            delivery_mode=DeliveryMode.BUYER_PICKUP,
            payment_method=PaymentMethod.UPI,
            payment_status=PaymentStatus.PAID,
        )

        events = order.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], OrderPlacedEvent)
        assert events[0].aggregate_id == order.id
        assert events[0].order_number == "ORD-123456-AB12"

    def test_advance_walks_the_table(self):
        order = _order()
        seen = [order.advance() for _ in range(4)]

        assert seen == [
            OrderStatus.CONFIRMED,
            OrderStatus.PREPARING,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        ]
        events = order.get_domain_events()
        assert all(isinstance(e, OrderStatusChangedEvent) for e in events)
        assert events[-1].new_status == "delivered"

    def test_advance_from_delivered_is_rejected(self):
        order = _order(OrderStatus.DELIVERED)
        with pytest.raises(InvalidStateTransition):
            order.advance()
        assert order.status == OrderStatus.DELIVERED

    @pytest.mark.parametrize("status", [OrderStatus.PENDING, OrderStatus.PREPARING, OrderStatus.SHIPPED])
    def test_cancel_open_order(self, status):
        order = _order(status)
        order.cancel("Out of stock")

        assert order.status == OrderStatus.CANCELLED
        assert order.cancelled_at is not None
        event = order.get_domain_events()[0]
        assert isinstance(event, OrderCancelledEvent)
        assert event.previous_status == status.value
        assert event.reason == "Out of stock"

    @pytest.mark.parametrize("status", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_cancel_closed_order_is_rejected(self, status):
        with pytest.raises(InvalidStateTransition):
            _order(status).cancel()

    def test_only_the_seller_may_change_it(self):
        order = _order()
        order.ensure_seller("seller-1")
        with pytest.raises(PermissionDeniedError):
            order.ensure_seller("buyer-1")

    def test_item_lookup_and_title(self):
        order = _order()
        item = order.items[0]
        assert order.contains_item(item.id) is item
        assert order.contains_item("nope") is None
        assert item.title == "Tomatoes"


class TestOrderNumber:

    def test_generated_format(self):
        value = str(OrderNumber.generate())
        assert value.startswith("ORD-")
        assert len(value) == len("ORD-123456-ABCD")

    @pytest.mark.parametrize("value", ["", "ORD-12-ABCD", "ord-123456-abcd", "123456"])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            OrderNumber(value)
