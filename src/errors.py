"""Withdrawal error taxonomy."""

from src.models.money import Money


class AtmConfigurationError(ValueError):
    """Raised when the ATM is built without one of its collaborators."""
    pass


class WithdrawalError(Exception):
    """Base class for errors that end a withdrawal.

    Attributes:
        money: The amount that was requested
        transaction_id: ID of the failed withdrawal, once one was assigned
    """

    def __init__(self, message: str, money: Money | None = None, transaction_id: str | None = None):
        super().__init__(message)
        self.money = money
        self.transaction_id = transaction_id


class WrongMoneyAmount(WithdrawalError):
    """Raised when the amount is negative or cannot be paid out in notes."""
    pass


class CardAuthorizationFailed(WithdrawalError):
    """Raised when the card authorizer does not issue a token."""
    pass


class InsufficientFunds(WithdrawalError):
    """Raised when the bank declines the charge."""
    pass


class MoneyDepotError(WithdrawalError):
    """Raised when the cash depot cannot release the notes."""
    pass
