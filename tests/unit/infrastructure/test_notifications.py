"""
Unit tests for notification adapters and event formatting.
"""
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from core.domain.events.base import DomainEvent
from core.domain.events.order_events import OrderPlacedEvent
from core.domain.events.return_events import ReturnRequestedEvent
from core.infrastructure.adapters.notifications.formatting import describe_event
from core.infrastructure.adapters.notifications.mock_notification_service import MockNotificationService
from core.infrastructure.adapters.notifications.slack_notification_service import SlackNotificationService
from core.settings.modules.integrations_settings import SlackSettings


@pytest.fixture
def placed_event():
    return OrderPlacedEvent(
        order_id="order-1",
        order_number="ORD-482913-K2QZ",
        buyer_id="buyer-1",
        seller_id="seller-1",
        total_amount=Decimal("284"),
        payment_method="cod",
        execution_id="exec-42",
    )


class TestDescribeEvent:

    def test_order_placed(self, placed_event):
        message, severity = describe_event(placed_event)

        assert "ORD-482913-K2QZ" in message
        assert "284 INR" in message
        assert severity == 40

    def test_return_requested_is_more_severe(self):
        event = ReturnRequestedEvent(
            return_id="ret-1",
            order_id="order-1",
            reason="quality_issue",
            item_count=2,
        )
        message, severity = describe_event(event)

        assert "quality_issue" in message
        assert "2 items" in message
        assert severity == 60

    def test_unknown_event_gets_generic_line(self):
        event = DomainEvent(aggregate_id="agg-1")
        message, severity = describe_event(event)

        assert message == "DomainEvent (agg-1)"
        assert severity == 20


class TestMockNotificationService:

    @pytest.mark.asyncio
    async def test_records_events_and_generic_messages(self, placed_event):
        service = MockNotificationService()

        await service.send_event(placed_event)
        await service.notify("Nightly cleanup finished", severity=10)

        sent = service.get_notifications()
        assert [n["type"] for n in sent] == ["event", "generic"]
        assert sent[0]["execution_id"] == "exec-42"
        assert sent[1]["severity"] == 10

        service.clear()
        assert service.get_notifications() == []


class TestSlackNotificationService:

    @pytest.fixture
    def settings(self):
        return SlackSettings(
            FARMER_CONNECT_SLACK_ENABLED=True,
            SLACK_WEBHOOK_URL="https://hooks.slack.test/T000/B000",
            FARMER_CONNECT_SLACK_PREFIX="[TEST]",
        )

    @pytest.mark.asyncio
    async def test_send_event_includes_execution_id(self, settings, placed_event):
        service = SlackNotificationService(settings)
        service._send_message = AsyncMock()

        await service.send_event(placed_event)

        text = service._send_message.call_args.args[0]
        assert text.startswith("[TEST] ")
        assert "ORD-482913-K2QZ" in text
        assert "`exec-42`" in text
        assert service._send_message.call_args.kwargs["color"] == "good"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("severity,color", [(90, "danger"), (50, "warning"), (10, "good")])
    async def test_severity_maps_to_color(self, settings, severity, color):
        service = SlackNotificationService(settings)
        service._send_message = AsyncMock()

        await service.notify("hello", severity=severity)

        assert service._send_message.call_args.kwargs["color"] == color

    @pytest.mark.asyncio
    async def test_missing_webhook_skips_request(self):
        service = SlackNotificationService(SlackSettings(SLACK_WEBHOOK_URL=""))
        # Returns without opening a client session.
        await service.notify("nobody listening")
