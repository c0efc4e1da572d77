"""Notification adapters.

The Slack adapter pulls in aiohttp; import it from its module when the
webhook is enabled rather than from this package.
"""

from .formatting import describe_event
from .mock_notification_service import MockNotificationService

__all__ = ["describe_event", "MockNotificationService"]
