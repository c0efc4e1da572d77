"""Domain layer - pure domain models and interfaces."""

from .entities import Cart, CartItem, Order, OrderItem, Product, ReturnRequest
from .value_objects import ExecutionID, Money, OrderNumber

__all__ = [
    "Cart",
    "CartItem",
    "ExecutionID",
    "Money",
    "Order",
    "OrderItem",
    "OrderNumber",
    "Product",
    "ReturnRequest",
]
