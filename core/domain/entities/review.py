"""Product review entity."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..value_objects import new_id


@dataclass
class Review:
    product_id: str
    buyer_id: str
    seller_id: str
    rating: int
    comment: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.rating, int) or not 1 <= self.rating <= 5:
            raise ValueError("Please select a rating between 1 and 5")
        if self.comment is not None:
            self.comment = self.comment.strip() or None
