"""
Test adapter selection in the API dependency providers.

SUPABASE_LOCAL_MODE swaps the hosted auth and storage clients for the
in-process token table and bucket.
"""
import pytest

from apps.api import deps
from core.infrastructure.adapters.memory import InMemoryStorageClient, StaticTokenAuthProvider
from core.infrastructure.adapters.supabase.auth_client import SupabaseAuthClient
from core.infrastructure.adapters.supabase.storage_client import SupabaseStorageClient
from core.settings import get_app_settings


def _reset_caches():
    get_app_settings.cache_clear()
    deps._local_auth_provider.cache_clear()
    deps._local_storage_client.cache_clear()


@pytest.fixture(autouse=True)
def fresh_settings():
    _reset_caches()
    yield
    _reset_caches()


def test_hosted_adapters_by_default(monkeypatch):
    monkeypatch.delenv("SUPABASE_LOCAL_MODE", raising=False)

    assert isinstance(deps.get_auth_provider(), SupabaseAuthClient)
    assert isinstance(deps.get_storage_client(access_token="tok"), SupabaseStorageClient)


@pytest.mark.asyncio
async def test_local_mode_uses_in_process_adapters(monkeypatch):
    monkeypatch.setenv("SUPABASE_LOCAL_MODE", "true")
    monkeypatch.setenv("SUPABASE_LOCAL_TOKENS", '{"dev-token": "dev-user"}')

    provider = deps.get_auth_provider()
    storage = deps.get_storage_client(access_token=None)

    assert isinstance(provider, StaticTokenAuthProvider)
    assert await provider.get_user_id("dev-token") == "dev-user"
    assert isinstance(storage, InMemoryStorageClient)
    assert deps.get_storage_client(access_token="other") is storage
    assert deps.get_auth_provider() is provider
