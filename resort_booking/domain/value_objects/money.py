"""Value Object Money - a non-negative amount with two decimal places."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary amount.

    Prices in the catalog share a single house currency, so the amount is
    all that travels through the engine.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        amount = self.amount
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        if amount < 0:
            raise ValueError(f"amount cannot be negative: {amount}")
        object.__setattr__(self, "amount", amount.quantize(CENT, rounding=ROUND_HALF_UP))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError(f"Cannot add Money and {type(other)}")
        return Money(amount=self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        """Price of ``quantity`` units (e.g. nights) at this unit price."""
        if quantity < 0:
            raise ValueError(f"quantity cannot be negative: {quantity}")
        return Money(amount=self.amount * quantity)

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
