"""In-memory storage bucket."""
from typing import Dict, Optional, Tuple

from core.application.interfaces import IStorageClient, StorageError


class InMemoryStorageClient(IStorageClient):
    """Keeps uploaded objects in a dict keyed by (bucket, path)."""

    def __init__(self, base_url: str = "memory://storage", fail_paths: Optional[set] = None):
        self.base_url = base_url.rstrip("/")
        self.objects: Dict[Tuple[str, str], bytes] = {}
        self.fail_paths = fail_paths or set()

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/object/public/{bucket}/{path}"

    async def upload(self, bucket: str, path: str, content: bytes, content_type: Optional[str] = None) -> str:
        if any(marker in path for marker in self.fail_paths):
            raise StorageError(f"Upload to {bucket}/{path} rejected")
        self.objects[(bucket, path)] = content
        return self.public_url(bucket, path)
