"""
Supabase Storage adapter.

Uploads objects to public buckets and builds their public URLs.
"""
from typing import Optional

import aiohttp

from core.application.interfaces import IStorageClient, StorageError
from core.infrastructure.logging import get_logger
from core.settings.modules.supabase_settings import SupabaseSettings


logger = get_logger(__name__)


class SupabaseStorageClient(IStorageClient):
    """aiohttp client for `{url}/storage/v1`."""

    def __init__(self, settings: SupabaseSettings, access_token: Optional[str] = None):
        self.settings = settings
        self._base_url = f"{settings.base_url}/storage/v1"
        self._timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        self._access_token = access_token

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._base_url}/object/public/{bucket}/{path}"

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
            StorageError: on a non-2xx response or a transport error
        """
        headers = {
            "apikey": self.settings.anon_key,
            "Authorization": f"Bearer {self._access_token or self.settings.anon_key}",
            "Content-Type": content_type or "application/octet-stream",
        }
        url = f"{self._base_url}/object/{bucket}/{path}"

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(url, data=content, headers=headers) as response:
                    if response.status >= 300:
                        error_text = await response.text()
                        raise StorageError(f"Upload to {bucket}/{path} failed: {response.status} - {error_text}")
        except aiohttp.ClientError as e:
            raise StorageError(f"Upload to {bucket}/{path} failed: {e}") from e

        logger.info(f"Uploaded {bucket}/{path} ({len(content)} bytes)")
        return self.public_url(bucket, path)
