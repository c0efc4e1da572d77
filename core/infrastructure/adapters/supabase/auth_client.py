"""
Supabase Auth adapter.

Exchanges OAuth callback codes and resolves bearer tokens through the
hosted auth REST API.
"""
from typing import Optional

import aiohttp

from core.application.interfaces import AuthSession, IAuthProvider
from core.infrastructure.logging import get_logger
from core.settings.modules.supabase_settings import SupabaseSettings


logger = get_logger(__name__)


def pkce_payload(code: str, code_verifier: Optional[str]) -> dict:
    """Body for `POST /token?grant_type=pkce`."""
    payload = {"auth_code": code}
    if code_verifier:
        payload["code_verifier"] = code_verifier
    return payload


class SupabaseAuthClient(IAuthProvider):
    """aiohttp client for `{url}/auth/v1`."""

    def __init__(self, settings: SupabaseSettings):
        self.settings = settings
        self._base_url = f"{settings.base_url}/auth/v1"
        self._timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)

    def _headers(self, access_token: Optional[str] = None) -> dict:
        headers = {"apikey": self.settings.anon_key}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def exchange_code(self, code: str, code_verifier: Optional[str] = None) -> Optional[AuthSession]:
        """
        Exchange an OAuth callback code for a session.

        The PKCE grant is rejected by the hosted API without the verifier
        the browser generated when it started the flow.

        Returns:
            AuthSession, or None if the provider rejected the code or was unreachable
        """
        url = f"{self._base_url}/token?grant_type=pkce"
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(url, json=pkce_payload(code, code_verifier), headers=self._headers()) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.warning(f"Code exchange rejected: {response.status} - {error_text}")
                        return None
                    data = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Code exchange failed: {e}", exc_info=True)
            return None

        user = data.get("user") or {}
        if not user.get("id") or not data.get("access_token"):
            logger.warning("Code exchange response missing user or token")
            return None

        return AuthSession(
            user_id=user["id"],
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
        )

    async def get_user_id(self, access_token: str) -> Optional[str]:
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(
                    f"{self._base_url}/user", headers=self._headers(access_token)
                ) as response:
                    if response.status != 200:
                        logger.info(f"Token rejected by auth service: {response.status}")
                        return None
                    data = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Token lookup failed: {e}", exc_info=True)
            return None

        return data.get("id")
