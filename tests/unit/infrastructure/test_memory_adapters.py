"""Unit tests for in-process auth and storage adapters."""

import pytest

from core.application.interfaces import StorageError
from core.infrastructure.adapters.memory import InMemoryStorageClient, StaticTokenAuthProvider
from core.infrastructure.adapters.supabase.auth_client import pkce_payload
from core.infrastructure.adapters.supabase.storage_client import SupabaseStorageClient
from core.settings.modules.supabase_settings import SupabaseSettings


class TestStaticTokenAuthProvider:

    @pytest.mark.asyncio
    async def test_known_token(self):
        provider = StaticTokenAuthProvider(tokens={"abc": "user-1"})
        assert await provider.get_user_id("abc") == "user-1"
        assert await provider.get_user_id("nope") is None

    @pytest.mark.asyncio
    async def test_exchange_code_issues_usable_token(self):
        provider = StaticTokenAuthProvider(codes={"code-1": "user-2"})

        session = await provider.exchange_code("code-1")

        assert session.user_id == "user-2"
        assert await provider.get_user_id(session.access_token) == "user-2"
        assert await provider.exchange_code("bad-code") is None

    @pytest.mark.asyncio
    async def test_exchange_requires_matching_verifier(self):
        provider = StaticTokenAuthProvider(codes={"code-1": "user-2"}, verifiers={"code-1": "ver-1"})

        assert await provider.exchange_code("code-1") is None
        assert await provider.exchange_code("code-1", "wrong") is None
        assert (await provider.exchange_code("code-1", "ver-1")).user_id == "user-2"


class TestSupabaseAuthClient:

    def test_pkce_payload_carries_verifier(self):
        assert pkce_payload("code-1", "ver-1") == {"auth_code": "code-1", "code_verifier": "ver-1"}

    def test_pkce_payload_without_verifier(self):
        assert pkce_payload("code-1", None) == {"auth_code": "code-1"}


class TestInMemoryStorageClient:

    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self):
        storage = InMemoryStorageClient()

        url = await storage.upload("chat-images", "chat/c1/1-a.png", b"png", "image/png")

        assert url == "memory://storage/object/public/chat-images/chat/c1/1-a.png"
        assert storage.objects[("chat-images", "chat/c1/1-a.png")] == b"png"

    @pytest.mark.asyncio
    async def test_rejected_path_raises(self):
        storage = InMemoryStorageClient(fail_paths={"broken"})
        with pytest.raises(StorageError):
            await storage.upload("return_proofs", "r1-0-broken.jpg", b"x")
        assert storage.objects == {}


def test_supabase_public_url_uses_base_url():
    settings = SupabaseSettings(SUPABASE_URL="https://proj.supabase.co/")
    client = SupabaseStorageClient(settings)

    assert client.public_url("return_proofs", "r1-0-1.jpg") == (
        "https://proj.supabase.co/storage/v1/object/public/return_proofs/r1-0-1.jpg"
    )
