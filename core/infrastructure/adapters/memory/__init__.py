"""In-process adapters for local development and tests."""

from .auth import StaticTokenAuthProvider
from .storage import InMemoryStorageClient

__all__ = ["InMemoryStorageClient", "StaticTokenAuthProvider"]
