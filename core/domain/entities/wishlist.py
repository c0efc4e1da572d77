"""Saved products, sellers and searches."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..value_objects import new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SavedProduct:
    user_id: str
    product_id: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class SavedSeller:
    user_id: str
    seller_id: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class SavedSearch:
    user_id: str
    query: str
    filters: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_browse(cls, user_id: str, query: str, category: Optional[str], organic_only: bool) -> "SavedSearch":
        if not query or not query.strip():
            raise ValueError("Enter a search term to save")
        return cls(
            user_id=user_id,
            query=query.strip(),
            filters={"category": category, "organic_only": organic_only},
        )
