"""Order number value object."""
import random
import re
import string
import time
from dataclasses import dataclass


_ORDER_NUMBER_RE = re.compile(r"^ORD-\d{6}-[A-Z0-9]{4}$")


@dataclass(frozen=True)
class OrderNumber:
    """
    Human-facing order reference shown to buyers and sellers.

    Format: ORD-XXXXXX-YYYY
    - XXXXXX: last six digits of the epoch milliseconds at checkout
    - YYYY:   four random upper-case alphanumerics

    Examples:
    - ORD-482913-K2QZ
    - ORD-000417-7HBA
    """
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Order number cannot be empty")

        if not _ORDER_NUMBER_RE.match(self.value):
            raise ValueError(
                f"Invalid order number format (expected ORD-XXXXXX-YYYY): {self.value}"
            )

    @classmethod
    def generate(cls) -> "OrderNumber":
        millis = str(int(time.time() * 1000))[-6:]
        suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=4))
        return cls(value=f"ORD-{millis}-{suffix}")

    def __str__(self) -> str:
        return self.value
