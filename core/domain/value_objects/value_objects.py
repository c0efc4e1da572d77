"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Marketplace prices are quoted per unit of produce and fees are charged
    in whole rupees, so `rounded()` is used wherever a fee is derived from
    a percentage.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "INR"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str = "INR") -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        """Subtract two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot subtract different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __mul__(self, factor) -> 'Money':
        return Money(amount=self.amount * Decimal(str(factor)), currency=self.currency)

    def percent(self, rate) -> 'Money':
        """Return `rate` percent of this amount, rounded to whole units."""
        return (self * (Decimal(str(rate)) / Decimal("100"))).rounded()

    def rounded(self) -> 'Money':
        """Round half-up to whole currency units."""
        return Money(
            amount=self.amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def is_zero(self) -> bool:
        return self.amount == 0


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for request/unit-of-work tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


def new_id() -> str:
    """Generate a row identifier in the hosted store's UUID-string format."""
    return str(uuid4())
