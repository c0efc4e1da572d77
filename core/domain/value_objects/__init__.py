"""Domain value objects."""

from .value_objects import ExecutionID, Money, new_id
from .order_number import OrderNumber

__all__ = [
    "ExecutionID",
    "Money",
    "OrderNumber",
    "new_id",
]
