"""Unit tests for the in-memory event bus."""

import pytest

from core.domain.event_bus import EventBus
from core.domain.events.order_events import OrderStatusChangedEvent
from core.infrastructure.adapters.notifications.mock_notification_service import MockNotificationService
from core.infrastructure.event_bus import InMemoryEventBus, notification_subscriber


def _event(new_status="confirmed") -> OrderStatusChangedEvent:
    return OrderStatusChangedEvent(
        order_id="order-1",
        order_number="ORD-123456-ABCD",
        previous_status="pending",
        new_status=new_status,
    )


class TestInMemoryEventBus:

    def test_implements_the_domain_bus(self):
        assert isinstance(InMemoryEventBus(), EventBus)

    def test_domain_bus_requires_subscription_methods(self):
        assert {"publish", "publish_all", "subscribe", "unsubscribe"} <= EventBus.__abstractmethods__

    @pytest.mark.asyncio
    async def test_sync_and_async_subscribers_receive_events_in_order(self):
        bus = InMemoryEventBus()
        received = []

        def sync_handler(event):
            received.append(("sync", event.new_status))

        async def async_handler(event):
            received.append(("async", event.new_status))

        bus.subscribe(sync_handler)
        bus.subscribe(async_handler)

        await bus.publish_all([_event("confirmed"), _event("preparing")])

        assert received == [
            ("sync", "confirmed"),
            ("async", "confirmed"),
            ("sync", "preparing"),
            ("async", "preparing"),
        ]

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_stop_others(self):
        bus = InMemoryEventBus()
        received = []

        async def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(broken)
        bus.subscribe(received.append)

        await bus.publish(_event())

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_subscribe_is_idempotent_and_unsubscribe_stops_delivery(self):
        bus = InMemoryEventBus()
        received = []
        bus.subscribe(received.append)
        bus.subscribe(received.append)

        await bus.publish(_event())
        bus.unsubscribe(received.append)
        await bus.publish(_event())

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_publish_all_with_no_events(self):
        bus = InMemoryEventBus()
        await bus.publish_all([])


@pytest.mark.asyncio
async def test_notification_subscriber_forwards_events():
    bus = InMemoryEventBus()
    service = MockNotificationService()
    bus.subscribe(notification_subscriber(service))

    event = _event()
    event.execution_id = "exec-1"
    await bus.publish(event)

    sent = service.get_notifications()
    assert len(sent) == 1
    assert sent[0]["event_type"] == "OrderStatusChangedEvent"
    assert sent[0]["execution_id"] == "exec-1"
    assert sent[0]["aggregate_id"] == "order-1"
