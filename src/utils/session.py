"""Transaction context for log correlation."""

import contextvars
from typing import Optional

# Context variable for the withdrawal currently being processed
_current_transaction_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "current_transaction_id", default=None
)


def get_current_transaction_id() -> Optional[str]:
    """Get the ID of the withdrawal in progress.

    Returns:
        The transaction ID, or None outside of a withdrawal
    """
    return _current_transaction_id.get()


def set_current_transaction_id(transaction_id: str) -> contextvars.Token[Optional[str]]:
    """Set the transaction ID in context.

    Args:
        transaction_id: The transaction ID to set

    Returns:
        Token that can be used to reset the context
    """
    return _current_transaction_id.set(transaction_id)


def reset_current_transaction_id(token: contextvars.Token[Optional[str]]) -> None:
    """Reset the transaction ID context to its previous value.

    Args:
        token: Token returned from set_current_transaction_id()
    """
    _current_transaction_id.reset(token)
