"""
Shopping cart aggregate.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from ..value_objects import Money


@dataclass
class CartItem:
    """One cart line. A cart holds at most one line per product."""
    product_id: str
    seller_id: str
    title: str
    price_per_unit: Decimal
    unit: str
    quantity: int
    available_quantity: int
    variety: Optional[str] = None
    image: Optional[str] = None
    seller_name: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.price_per_unit, Decimal):
            self.price_per_unit = Decimal(str(self.price_per_unit))
        if self.available_quantity < 0:
            self.available_quantity = 0
        self.quantity = self._clamp(self.quantity)

    def _clamp(self, quantity: int) -> int:
        return max(0, min(quantity, self.available_quantity))

    @property
    def line_total(self) -> Money:
        return Money(amount=self.price_per_unit * self.quantity)


@dataclass
class Cart:
    """
    Cart for a single user.

    Quantities never go negative and never exceed the stock that was
    available when the line was added.
    """
    user_id: str
    items: List[CartItem] = field(default_factory=list)

    def find(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, item: CartItem, quantity: int = 1) -> CartItem:
        """
        Add a product to the cart.

        If the product is already present its quantity is increased and
        capped at the available stock; otherwise the line is appended.
        Raises ValueError when the listing has no stock left.

        Returns:
            The cart line holding the product
        """
        if quantity <= 0:
            raise ValueError("Quantity must be positive")
        if item.available_quantity < 1:
            raise ValueError("Out of stock")

        existing = self.find(item.product_id)
        if existing:
            existing.available_quantity = item.available_quantity
            existing.quantity = min(existing.quantity + quantity, existing.available_quantity)
            return existing

        item.quantity = item._clamp(quantity)
        self.items.append(item)
        return item

    def remove_item(self, product_id: str) -> None:
        self.items = [i for i in self.items if i.product_id != product_id]

    def update_qty(self, product_id: str, quantity: int) -> Optional[CartItem]:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(product_id)
            return None

        existing = self.find(product_id)
        if existing is None:
            return None
        existing.quantity = existing._clamp(quantity)
        if existing.quantity < 1:
            self.remove_item(product_id)
            return None
        return existing

    def clear(self) -> None:
        self.items = []

    def drop_unavailable(self) -> List[CartItem]:
        """Remove lines that can no longer be bought; returns the removed lines."""
        dropped = [i for i in self.items if i.quantity < 1]
        self.items = [i for i in self.items if i.quantity >= 1]
        return dropped

    def total_items(self) -> int:
        return sum(i.quantity for i in self.items)

    def total_amount(self) -> Money:
        total = Money.zero()
        for item in self.items:
            total = total + item.line_total
        return total

    def items_by_seller(self) -> Dict[str, List[CartItem]]:
        """Group lines by seller, preserving first-seen seller order."""
        groups: Dict[str, List[CartItem]] = {}
        for item in self.items:
            groups.setdefault(item.seller_id, []).append(item)
        return groups

    def is_empty(self) -> bool:
        return not self.items
