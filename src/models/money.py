"""Money model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Currency(str, Enum):
    """Currencies the ATM can dispense."""

    PL = "PL"
    EUR = "EUR"
    USD = "USD"


class Money(BaseModel):
    """An integer amount in a given currency.

    A negative amount is representable; withdrawing it is rejected.
    """

    model_config = ConfigDict(frozen=True)

    amount: int = Field(description="Amount in whole currency units")
    currency: Currency = Field(default=Currency.PL, description="Currency of the amount")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.value}"

    def to_display_dict(self) -> dict:
        """Return a dictionary suitable for logging."""
        return {
            "amount": self.amount,
            "currency": self.currency.value,
        }
