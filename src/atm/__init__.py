"""ATM module - withdrawal flow and banknote selection."""

from .core import AtmMachine
from .banknotes import DenominationTable, select_banknotes
from .services import BankLedger, CardAuthorizer, CashDepot

__all__ = [
    "AtmMachine",
    "DenominationTable",
    "select_banknotes",
    "BankLedger",
    "CardAuthorizer",
    "CashDepot",
]
