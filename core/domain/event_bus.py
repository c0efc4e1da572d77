"""Where aggregates' recorded events go once a unit of work commits."""
from abc import ABC, abstractmethod
from typing import Callable, List

from .events.base import DomainEvent


EventHandler = Callable[[DomainEvent], object]


class EventBus(ABC):
    """
    Publish side used by application services.

    Order placement, status changes and return requests arrive here
    already tagged with the execution id of the request that caused them.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        ...

    @abstractmethod
    async def publish_all(self, events: List[DomainEvent]) -> None:
        """Deliver events in the order the aggregates recorded them."""

    @abstractmethod
    def subscribe(self, handler: EventHandler) -> None:
        """Register a sync or async handler for every event."""

    @abstractmethod
    def unsubscribe(self, handler: EventHandler) -> None:
        ...
