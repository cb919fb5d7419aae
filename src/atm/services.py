"""Interfaces of the services the ATM talks to."""

from typing import Optional, Protocol, Sequence, runtime_checkable

from src.models import AuthenticationToken, Banknote, Card, Money


@runtime_checkable
class CardAuthorizer(Protocol):
    """Card authority that checks a card and PIN."""

    def authorize(self, card: Card) -> Optional[AuthenticationToken]:
        """Return a token for the card, or None when authorization is denied.

        A denial is a normal answer and must not raise.
        """
        ...


@runtime_checkable
class BankLedger(Protocol):
    """Bank holding the card holder's account."""

    def charge(self, token: AuthenticationToken, money: Money) -> bool:
        """Charge the account; False when the bank declines."""
        ...

    def abort(self, token: AuthenticationToken) -> None:
        """Reverse a charge or hold made with the token.

        Called at most once per failed withdrawal. Implementations should
        still make it idempotent.
        """
        ...


@runtime_checkable
class CashDepot(Protocol):
    """Physical note storage of the ATM."""

    def release_banknotes(self, banknotes: Sequence[Banknote]) -> bool:
        """Dispense the notes; False when they cannot be dispensed."""
        ...
