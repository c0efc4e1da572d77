"""
Mock Notification Service Implementation.

This simulates notifications for testing and local development.
"""
import logging

from core.application.interfaces import INotificationService
from core.domain.events.base import DomainEvent

from .formatting import describe_event


logger = logging.getLogger(__name__)


class MockNotificationService(INotificationService):
    """
    Mock implementation of notification service.

    Logs notifications instead of actually sending them.
    """

    def __init__(self):
        self.notifications_sent = []
        logger.info("MockNotificationService initialized (console logging)")

    async def send_event(self, event: DomainEvent) -> None:
        message, severity = describe_event(event)
        self.notifications_sent.append(
            {
                "type": "event",
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "execution_id": event.execution_id,
                "message": message,
                "severity": severity,
            }
        )
        logger.info(f"🔔 EVENT NOTIFICATION [{event.execution_id}]: {message}")

    async def notify(self, message: str, severity: int = 50) -> None:
        """
        Send a generic notification message.

        Args:
            message: Notification message
            severity: Severity level (0-100, higher = more critical)
        """
        self.notifications_sent.append(
            {"type": "generic", "message": message, "severity": severity}
        )

        severity_emoji = "🔴" if severity >= 80 else "🟡" if severity >= 50 else "🟢"
        logger.info(f"{severity_emoji} 🔔 NOTIFICATION (severity={severity}): {message}")

    def get_notifications(self) -> list:
        """Get all sent notifications (for testing)."""
        return self.notifications_sent

    def clear(self) -> None:
        self.notifications_sent.clear()
