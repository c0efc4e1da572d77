from __future__ import annotations

from typing import Dict

from pydantic import Field

from core.settings.base_settings import FarmerConnectBaseSettings


class SupabaseSettings(FarmerConnectBaseSettings):
    """
    Hosted backend (auth + storage) settings.
    Loaded from .env file with exact variable name matching.
    """

    url: str = Field(default="http://localhost:54321", alias="SUPABASE_URL")
    anon_key: str = Field(default="", alias="SUPABASE_ANON_KEY")
    timeout_seconds: float = Field(default=10.0, alias="SUPABASE_TIMEOUT_SECONDS")
    return_proofs_bucket: str = Field(default="return_proofs", alias="SUPABASE_RETURN_PROOFS_BUCKET")
    chat_images_bucket: str = Field(default="chat-images", alias="SUPABASE_CHAT_IMAGES_BUCKET")
    auth_redirect_path: str = Field(default="/app/home", alias="AUTH_REDIRECT_PATH")

    # Offline development: token table auth and in-process storage
    local_mode: bool = Field(default=False, alias="SUPABASE_LOCAL_MODE")
    local_tokens: Dict[str, str] = Field(default_factory=dict, alias="SUPABASE_LOCAL_TOKENS")

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")
