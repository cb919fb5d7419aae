"""Models module - Pydantic value objects."""

from .money import Currency, Money
from .card import Card, AuthenticationToken
from .payment import Banknote, Payment

__all__ = [
    "Currency",
    "Money",
    "Card",
    "AuthenticationToken",
    "Banknote",
    "Payment",
]
