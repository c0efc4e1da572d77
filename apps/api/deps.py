"""
FastAPI dependencies for dependency injection.

Every provider here can be swapped with `app.dependency_overrides`;
tests replace the session factory, auth provider and storage client.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.dtos.profile_dto import ProfileDTO
from core.application.interfaces import IAuthProvider, IStorageClient
from core.application.services import (
    AuthService,
    CartService,
    CatalogService,
    CheckoutService,
    DashboardService,
    MessagingService,
    OrderApplicationService,
    ProfileService,
    ReturnService,
    ReviewService,
    WishlistService,
)
from core.domain.event_bus import EventBus
from core.domain.exceptions import PermissionDeniedError
from core.infrastructure.adapters.memory import InMemoryStorageClient, StaticTokenAuthProvider
from core.infrastructure.adapters.supabase.auth_client import SupabaseAuthClient
from core.infrastructure.adapters.supabase.storage_client import SupabaseStorageClient
from core.infrastructure.database import config as database_config
from core.infrastructure.event_bus import get_event_bus as _get_event_bus
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# INFRASTRUCTURE
# =============================================================================

def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return database_config.get_session_factory()


def get_event_bus() -> EventBus:
    return _get_event_bus()


@lru_cache()
def _local_auth_provider() -> StaticTokenAuthProvider:
    return StaticTokenAuthProvider(tokens=get_app_settings().supabase.local_tokens)


@lru_cache()
def _local_storage_client() -> InMemoryStorageClient:
    return InMemoryStorageClient()


def get_auth_provider() -> IAuthProvider:
    """Hosted auth, or the token table when SUPABASE_LOCAL_MODE is set."""
    settings = get_app_settings().supabase
    if settings.local_mode:
        return _local_auth_provider()
    return SupabaseAuthClient(settings)


def get_access_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """Extract the bearer token from the Authorization header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_storage_client(access_token: Optional[str] = Depends(get_access_token)) -> IStorageClient:
    """Storage client acting with the caller's session."""
    settings = get_app_settings().supabase
    if settings.local_mode:
        return _local_storage_client()
    return SupabaseStorageClient(settings, access_token=access_token)


# =============================================================================
# AUTHENTICATION
# =============================================================================

def get_auth_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    provider: IAuthProvider = Depends(get_auth_provider),
) -> AuthService:
    return AuthService(session_factory, provider, get_app_settings().supabase)


async def get_current_user(
    access_token: Optional[str] = Depends(get_access_token),
    auth: AuthService = Depends(get_auth_service),
) -> ProfileDTO:
    """Resolve the signed-in user; raises AuthenticationError (401) when absent."""
    return await auth.authenticate(access_token)


async def get_optional_user(
    access_token: Optional[str] = Depends(get_access_token),
    auth: AuthService = Depends(get_auth_service),
) -> Optional[ProfileDTO]:
    """Signed-in user for pages that also work anonymously."""
    if not access_token:
        return None
    return await auth.authenticate(access_token)


async def get_current_seller(user: ProfileDTO = Depends(get_current_user)) -> ProfileDTO:
    if not user.can_sell:
        raise PermissionDeniedError("A seller account is required")
    return user


# =============================================================================
# APPLICATION SERVICES
# =============================================================================

def get_cart_service(session_factory=Depends(get_session_factory)) -> CartService:
    return CartService(session_factory)


def get_checkout_service(
    session_factory=Depends(get_session_factory),
    event_bus: EventBus = Depends(get_event_bus),
) -> CheckoutService:
    return CheckoutService(session_factory, event_bus, get_app_settings().marketplace)


def get_order_service(
    session_factory=Depends(get_session_factory),
    event_bus: EventBus = Depends(get_event_bus),
) -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(session_factory, event_bus)


def get_return_service(
    session_factory=Depends(get_session_factory),
    storage: IStorageClient = Depends(get_storage_client),
    event_bus: EventBus = Depends(get_event_bus),
) -> ReturnService:
    return ReturnService(session_factory, storage, event_bus, get_app_settings().supabase)


def get_catalog_service(session_factory=Depends(get_session_factory)) -> CatalogService:
    return CatalogService(session_factory, settings=get_app_settings().marketplace)


def get_review_service(session_factory=Depends(get_session_factory)) -> ReviewService:
    return ReviewService(session_factory)


def get_wishlist_service(session_factory=Depends(get_session_factory)) -> WishlistService:
    return WishlistService(session_factory)


def get_profile_service(session_factory=Depends(get_session_factory)) -> ProfileService:
    return ProfileService(session_factory)


def get_dashboard_service(session_factory=Depends(get_session_factory)) -> DashboardService:
    return DashboardService(session_factory)


def get_messaging_service(
    session_factory=Depends(get_session_factory),
    storage: IStorageClient = Depends(get_storage_client),
) -> MessagingService:
    return MessagingService(session_factory, storage, settings=get_app_settings().supabase)
