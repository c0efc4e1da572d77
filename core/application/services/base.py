"""Shared plumbing for application services."""

import logging
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.data.uow import UnitOfWork, create_uow
from core.domain.entities.profile import Profile
from core.domain.event_bus import EventBus
from core.domain.exceptions import NotFoundError, PermissionDeniedError


logger = logging.getLogger(__name__)


class ApplicationService:
    """
    Base class for application services.

    Responsibilities:
    - Open one UoW per operation
    - Publish aggregate events only after the UoW committed
    """

    def __init__(self, session_factory: async_sessionmaker, event_bus: Optional[EventBus] = None) -> None:
        """Initialize application service.

        Args:
            session_factory: SQLAlchemy async session factory
            event_bus: Bus receiving domain events after commit
        """
        self._session_factory = session_factory
        self._event_bus = event_bus

    def _uow(self) -> UnitOfWork:
        return create_uow(self._session_factory)

    async def _publish(self, aggregates: Iterable, uow: UnitOfWork) -> None:
        """Tag collected events with the UoW execution id and publish them."""
        events = []
        for aggregate in aggregates:
            for event in aggregate.get_domain_events():
                event.execution_id = str(uow.execution_id)
                events.append(event)
            aggregate.clear_domain_events()

        if not events or self._event_bus is None:
            return

        await self._event_bus.publish_all(events)

    @staticmethod
    async def _require_seller(uow: UnitOfWork, user_id: str) -> Profile:
        profile = await uow.profiles.get(user_id)
        if profile is None:
            raise NotFoundError("profile", user_id)
        if not profile.can_sell:
            raise PermissionDeniedError("A seller account is required")
        return profile
