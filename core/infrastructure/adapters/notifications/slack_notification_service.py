"""
Slack Notification Service Implementation.

Sends notifications via Slack Webhook API.
"""
import logging

import aiohttp

from core.application.interfaces import INotificationService
from core.domain.events.base import DomainEvent
from core.settings.modules.integrations_settings import SlackSettings

from .formatting import describe_event


logger = logging.getLogger(__name__)


class SlackNotificationService(INotificationService):
    """
    Slack implementation of notification service.

    Sends notifications via Slack Webhook API.
    """

    def __init__(self, settings: SlackSettings, timeout_seconds: float = 10.0):
        """
        Initialize Slack notification service.

        Args:
            settings: Slack settings with webhook URL
            timeout_seconds: Total timeout for one webhook call
        """
        self.settings = settings
        self.webhook_url = settings.webhook_url
        self.prefix = settings.prefix
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        logger.info("SlackNotificationService initialized")

    async def send_event(self, event: DomainEvent) -> None:
        """Send a marketplace event to Slack."""
        message, severity = describe_event(event)
        text = f"{message}\nExecution: `{event.execution_id}`"
        await self.notify(text, severity=severity)

    async def notify(self, message: str, severity: int = 50) -> None:
        """
        Send a generic notification message.

        Args:
            message: Notification message
            severity: Severity level (0-100, higher = more critical)
        """
        color = "danger" if severity >= 80 else "warning" if severity >= 50 else "good"
        await self._send_message(f"{self.prefix} {message}", color=color)

    async def _send_message(self, text: str, color: str = "good") -> None:
        """
        Send message to Slack.

        Args:
            text: Message text
            color: Attachment color (good, warning, danger)
        """
        if not self.webhook_url:
            logger.warning("Slack webhook_url not configured, skipping notification")
            return

        payload = {
            "attachments": [
                {
                    "color": color,
                    "text": text,
                    "mrkdwn_in": ["text"],
                }
            ]
        }
        if self.settings.channel_id:
            payload["channel"] = self.settings.channel_id

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(self.webhook_url, json=payload) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"Slack API error: {response.status} - {error_text}")
                    else:
                        logger.info("Slack notification sent successfully")
        except Exception as e:
            logger.error(f"Failed to send Slack notification: {e}", exc_info=True)
