"""Application service for hosted-auth sign-in."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.profile_dto import ProfileDTO
from core.application.interfaces import IAuthProvider
from core.domain.exceptions import AuthenticationError
from core.settings.modules.supabase_settings import SupabaseSettings

from .profile_service import ProfileService


logger = logging.getLogger(__name__)


class AuthService:
    """
    Bridges the hosted auth API and local profiles.

    Passwords and OAuth secrets never reach this service: it only trades
    callback codes for sessions and bearer tokens for user ids.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        provider: IAuthProvider,
        settings: Optional[SupabaseSettings] = None,
    ) -> None:
        self._provider = provider
        self._settings = settings or SupabaseSettings()
        self._profiles = ProfileService(session_factory)

    async def callback_redirect(
        self,
        origin: str,
        code: Optional[str],
        next_path: Optional[str] = None,
        code_verifier: Optional[str] = None,
    ) -> str:
        """Exchange an OAuth callback code and return where to send the browser.

        Args:
            origin: Scheme and host of the incoming request
            code: Code from the provider redirect
            next_path: Path to land on after sign-in
            code_verifier: PKCE verifier from the browser, forwarded to the provider

        Returns:
            `<origin><next>` on success, `<origin>/?error=auth` otherwise
        """
        origin = origin.rstrip("/")
        if code:
            session = await self._provider.exchange_code(code, code_verifier)
            if session is not None:
                await self._profiles.ensure_profile(session.user_id)
                return f"{origin}{_safe_next(next_path) or self._settings.auth_redirect_path}"
            logger.warning("OAuth code exchange failed")
        return f"{origin}/?error=auth"

    async def authenticate(self, access_token: Optional[str]) -> ProfileDTO:
        """Resolve a bearer token to the caller's profile.

        Raises:
            AuthenticationError: missing, invalid or expired token
        """
        if not access_token:
            raise AuthenticationError("Sign in required")
        user_id = await self._provider.get_user_id(access_token)
        if user_id is None:
            raise AuthenticationError("Invalid or expired session")
        return await self._profiles.ensure_profile(user_id)


def _safe_next(next_path: Optional[str]) -> Optional[str]:
    # Only same-origin paths.
    if next_path and next_path.startswith("/") and not next_path.startswith("//"):
        return next_path
    return None
