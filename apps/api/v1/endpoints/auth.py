"""OAuth callback endpoint."""

from typing import Mapping, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse

from core.application.services import AuthService

from apps.api.deps import get_auth_service

router = APIRouter()

CODE_VERIFIER_COOKIE_SUFFIX = "-code-verifier"


def code_verifier_from_cookies(cookies: Mapping[str, str]) -> Optional[str]:
    """PKCE verifier the browser client stored as `sb-<project>-auth-token-code-verifier`."""
    for name, value in cookies.items():
        if name.endswith(CODE_VERIFIER_COOKIE_SUFFIX) and value:
            return value.strip('"')
    return None


@router.get("/auth/callback")
async def auth_callback(
    request: Request,
    code: Optional[str] = Query(default=None),
    next: Optional[str] = Query(default=None, description="Path to open after sign-in"),
    code_verifier: Optional[str] = Query(default=None, description="PKCE verifier when not sent as a cookie"),
    auth: AuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """Finish the hosted OAuth flow and redirect back into the app."""
    origin = str(request.base_url).rstrip("/")
    verifier = code_verifier or code_verifier_from_cookies(request.cookies)
    return RedirectResponse(await auth.callback_redirect(origin, code, next, verifier))
