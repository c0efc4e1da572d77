"""Application layer interfaces."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from core.domain.events.base import DomainEvent


@dataclass(frozen=True)
class AuthSession:
    """Result of a successful OAuth code exchange."""
    user_id: str
    access_token: str
    refresh_token: Optional[str] = None


class IAuthProvider(ABC):
    """
    Interface for the hosted auth service.

    The application never sees passwords or OAuth secrets; it only
    exchanges callback codes and resolves access tokens to user ids.
    """

    @abstractmethod
    async def exchange_code(self, code: str, code_verifier: Optional[str] = None) -> Optional[AuthSession]:
        """
        Exchange an OAuth callback code for a session.

        Args:
            code: Code from the provider redirect
            code_verifier: PKCE verifier the browser stored when the flow started

        Returns:
            AuthSession on success, None when the provider rejects the code
        """
        pass

    @abstractmethod
    async def get_user_id(self, access_token: str) -> Optional[str]:
        """
        Resolve a bearer access token to the auth user id.

        Args:
            access_token: Token from the Authorization header

        Returns:
            User id, or None for an invalid/expired token
        """
        pass


class IStorageClient(ABC):
    """Interface for hosted file storage buckets."""

    @abstractmethod
    async def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Upload a file and return its public URL.

        Raises:
            StorageError: if the upload was not accepted
        """
        pass

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        pass


class StorageError(Exception):
    """Upload rejected by the storage service."""


class INotificationService(ABC):
    """
    Interface for notification service operations.

    Implementations (Slack, console) must never raise: a failed
    notification is logged and the caller carries on.
    """

    @abstractmethod
    async def send_event(self, event: DomainEvent) -> None:
        """
        Announce a marketplace event (order placed, return requested, ...).

        Args:
            event: Published domain event
        """
        pass

    async def notify(self, message: str, severity: int = 50) -> None:
        """
        Send a generic notification message.

        Args:
            message: Notification message
            severity: Severity level (0-100, higher = more critical)
        """
        # Default implementation - can be overridden
        pass


__all__ = [
    "AuthSession",
    "IAuthProvider",
    "INotificationService",
    "IStorageClient",
    "StorageError",
]
