"""Token table auth provider."""
from typing import Dict, Optional

from core.application.interfaces import AuthSession, IAuthProvider


class StaticTokenAuthProvider(IAuthProvider):
    """
    Resolves tokens from a fixed mapping.

    `codes` maps OAuth callback codes to user ids; the issued access
    token for a code is the code itself prefixed with "token-". A code
    listed in `verifiers` is only exchanged with that PKCE verifier.
    """

    def __init__(
        self,
        tokens: Optional[Dict[str, str]] = None,
        codes: Optional[Dict[str, str]] = None,
        verifiers: Optional[Dict[str, str]] = None,
    ):
        self.tokens: Dict[str, str] = dict(tokens or {})
        self.codes: Dict[str, str] = dict(codes or {})
        self.verifiers: Dict[str, str] = dict(verifiers or {})

    async def exchange_code(self, code: str, code_verifier: Optional[str] = None) -> Optional[AuthSession]:
        user_id = self.codes.get(code)
        if user_id is None:
            return None
        if code in self.verifiers and self.verifiers[code] != code_verifier:
            return None
        token = f"token-{code}"
        self.tokens[token] = user_id
        return AuthSession(user_id=user_id, access_token=token)

    async def get_user_id(self, access_token: str) -> Optional[str]:
        return self.tokens.get(access_token)
