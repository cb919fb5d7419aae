"""Banknote selection for a withdrawal amount."""

from math import gcd
from typing import Mapping, Sequence

from src.config import settings
from src.errors import WrongMoneyAmount
from src.models import Banknote, Currency, Money


def normalize_denominations(denominations: Sequence[int]) -> tuple[int, ...]:
    """Return unique denominations sorted largest first.

    Raises:
        ValueError: If a denomination is not a positive integer
    """
    for value in denominations:
        if value <= 0:
            raise ValueError(f"Denomination must be positive, got {value}")
    return tuple(sorted(set(denominations), reverse=True))


def _count_notes(
    remaining: int,
    values: tuple[int, ...],
    failed: set[tuple[int, int]],
) -> list[int] | None:
    """Note counts per value that add up to remaining, or None.

    Tries the most notes of the largest value first and backs off one
    note at a time. (remaining, len(values)) pairs already known to fail
    are skipped.
    """
    if remaining == 0:
        return [0] * len(values)
    if not values or (remaining, len(values)) in failed:
        return None

    value, smaller = values[0], values[1:]
    for count in range(remaining // value, -1, -1):
        rest = _count_notes(remaining - count * value, smaller, failed)
        if rest is not None:
            return [count] + rest

    failed.add((remaining, len(values)))
    return None


def select_banknotes(
    amount: int,
    denominations: Sequence[int],
    currency: Currency = Currency.PL,
) -> list[Banknote]:
    """Break an amount into notes using the largest denominations first.

    Takes as many of the largest note as fit in the remainder, then moves
    to the next smaller one. When the smaller notes cannot close the
    remainder, one larger note is given back and the search goes on, so
    any amount the denominations can make up is paid out. The result
    depends only on the amount and the denominations, never on what the
    depot actually holds.

    Args:
        amount: Amount to pay out
        denominations: Available note values, in any order
        currency: Currency of the notes

    Returns:
        Notes whose values add up to exactly the amount, largest first

    Raises:
        WrongMoneyAmount: If the amount is negative or no combination of
            the denominations adds up to it exactly
    """
    money = Money(amount=amount, currency=currency)
    if amount < 0:
        raise WrongMoneyAmount(f"Cannot pay out a negative amount: {money}", money=money)

    values = normalize_denominations(denominations)
    counts = None
    if amount == 0 or (values and amount % gcd(*values) == 0):
        counts = _count_notes(amount, values, set())

    if counts is None:
        raise WrongMoneyAmount(
            f"{money} cannot be paid out with notes {list(values)}",
            money=money,
        )

    return [
        Banknote(value=value, currency=currency)
        for value, count in zip(values, counts)
        for _ in range(count)
    ]


class DenominationTable:
    """Note values available for each currency."""

    def __init__(self, table: Mapping[Currency, Sequence[int]]):
        self._table = {
            Currency(currency): normalize_denominations(values)
            for currency, values in table.items()
            if values
        }

    @classmethod
    def from_settings(cls) -> "DenominationTable":
        """Build the table from application settings."""
        return cls(settings.denominations.as_table())

    @property
    def currencies(self) -> list[Currency]:
        return list(self._table)

    def for_currency(self, currency: Currency) -> tuple[int, ...]:
        """Get the note values for a currency.

        Raises:
            WrongMoneyAmount: If no notes are configured for the currency
        """
        try:
            return self._table[currency]
        except KeyError:
            raise WrongMoneyAmount(f"No banknotes configured for currency {currency.value}") from None

    def breakdown(self, money: Money) -> list[Banknote]:
        """Break money into notes of its own currency."""
        try:
            denominations = self.for_currency(money.currency)
        except WrongMoneyAmount as e:
            e.money = money
            raise
        return select_banknotes(money.amount, denominations, money.currency)
