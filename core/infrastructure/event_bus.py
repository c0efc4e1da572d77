"""
Event Bus Implementation (Infrastructure Layer).

Notifies in-process subscribers about published domain events.
"""
import asyncio
import logging
from typing import List, Optional

from core.application.interfaces import INotificationService
from core.domain.event_bus import EventBus, EventHandler
from core.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Subscribers are called in registration order. A failing subscriber
    is logged and never stops delivery to the others or fails the
    publisher.
    """

    def __init__(self):
        self._subscribers: List[EventHandler] = []

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        await self._notify_subscribers(event)

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
        if not events:
            return

        logger.info(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(self, handler: EventHandler) -> None:
        """
        Subscribe to all domain events.

        Args:
            handler: Callback function that receives events
        """
        if handler not in self._subscribers:
            self._subscribers.append(handler)
        logger.info(f"Registered event subscriber: {getattr(handler, '__name__', handler)}")

    def unsubscribe(self, handler: EventHandler) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)
        logger.info(f"Unregistered event subscriber: {getattr(handler, '__name__', handler)}")

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all subscribers about an event."""
        if not self._subscribers:
            return

        logger.debug(f"Notifying {len(self._subscribers)} subscribers about {event.event_type}")

        for subscriber in list(self._subscribers):
            name = getattr(subscriber, "__name__", repr(subscriber))
            try:
                result = subscriber(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber {name} failed: {e}", exc_info=True)


def notification_subscriber(service: INotificationService) -> EventHandler:
    """Build a subscriber that forwards every event to a notification service."""

    async def forward_to_notifications(event: DomainEvent) -> None:
        await service.send_event(event)

    return forward_to_notifications


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create global event bus instance.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
