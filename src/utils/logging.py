"""Structured audit logging with PII redaction."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from src.utils.pii import hash_card_number, mask_card_number, mask_pii, redact_for_logging
from src.utils.session import get_current_transaction_id


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger


class AuditLogger:
    """Audit logger for withdrawal steps with card data protection.

    Every entry is one JSON line in ``audit_YYYY-MM-DD.jsonl`` and carries
    the transaction ID bound by the ATM for the current withdrawal.
    """

    def __init__(
        self,
        log_dir: Path | None = None,
        atm_id: str = "atm",
        use_presidio: bool = True,
    ):
        self.log_dir = log_dir or Path("logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.atm_id = atm_id
        self.use_presidio = use_presidio
        self._logger = get_logger(f"audit.{atm_id}")

    def mask_text(self, text: str) -> str:
        """Mask PII in free text before it is logged."""
        return mask_pii(text, use_presidio=self.use_presidio)

    def _get_log_file(self) -> Path:
        """Get the current audit log file path."""
        date_str = datetime.now().strftime("%Y-%m-%d")
        return self.log_dir / f"audit_{date_str}.jsonl"

    def _write_entry(self, entry: dict):
        """Write an audit entry to the log file."""
        entry["timestamp"] = datetime.now().isoformat()
        entry["atm_id"] = self.atm_id
        entry["transaction_id"] = get_current_transaction_id()

        with open(self._get_log_file(), "a", encoding="utf-8") as f:
            f.write(json.dumps(redact_for_logging(entry)) + "\n")

    def log_withdrawal_started(self, card_number: str, money: dict[str, Any]):
        """Log the start of a withdrawal."""
        entry = {
            "event": "withdrawal_started",
            "card": mask_card_number(card_number),
            "card_hash": hash_card_number(card_number),
            "money": money,
        }
        self._write_entry(entry)
        self._logger.info(
            f"Withdrawal of {money['amount']} {money['currency']} started "
            f"for card {mask_card_number(card_number)}"
        )

    def log_authorization(self, authorized: bool):
        """Log the card authorizer's answer."""
        self._write_entry({"event": "card_authorization", "authorized": authorized})
        if authorized:
            self._logger.debug("Card authorized")
        else:
            self._logger.warning("Card authorization denied")

    def log_charge(self, charged: bool, money: dict[str, Any]):
        """Log the bank ledger's answer to a charge."""
        self._write_entry({"event": "bank_charge", "charged": charged, "money": money})
        if not charged:
            self._logger.warning(
                f"Bank declined charge of {money['amount']} {money['currency']}"
            )

    def log_release(self, released: bool, notes: dict[str, int]):
        """Log the cash depot's answer to a release request."""
        self._write_entry({"event": "banknotes_released", "released": released, "notes": notes})
        if not released:
            self._logger.warning(f"Cash depot could not release notes {notes}")

    def log_abort(self, reason: str, error: str | None = None):
        """Log a compensating abort on the bank ledger."""
        entry = {
            "event": "bank_abort",
            "reason": reason,
            "error": self.mask_text(error) if error else None,
        }
        self._write_entry(entry)
        if error:
            self._logger.error(f"Bank abort after {reason} failed: {entry['error']}")
        else:
            self._logger.info(f"Bank hold aborted after {reason}")

    def log_withdrawal_completed(self, payment: dict[str, Any]):
        """Log a successful withdrawal."""
        self._write_entry({"event": "withdrawal_completed", "payment": payment})
        self._logger.info(f"Withdrawal completed: {payment['total']} dispensed")

    def log_withdrawal_failed(self, error_kind: str, details: str):
        """Log a withdrawal that ended with an error."""
        entry = {
            "event": "withdrawal_failed",
            "error_kind": error_kind,
            "details": self.mask_text(details),
        }
        self._write_entry(entry)
        self._logger.warning(f"Withdrawal failed ({error_kind}): {entry['details']}")
