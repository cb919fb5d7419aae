"""Utilities module - Logging, PII masking, transaction context."""

from .pii import mask_pii, mask_card_number, hash_card_number, redact_for_logging
from .logging import get_logger, AuditLogger
from .session import (
    get_current_transaction_id,
    set_current_transaction_id,
    reset_current_transaction_id,
)

__all__ = [
    "mask_pii",
    "mask_card_number",
    "hash_card_number",
    "redact_for_logging",
    "get_logger",
    "AuditLogger",
    "get_current_transaction_id",
    "set_current_transaction_id",
    "reset_current_transaction_id",
]
