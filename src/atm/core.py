"""Core withdrawal flow of the ATM."""

from uuid import uuid4

from src.atm.banknotes import DenominationTable
from src.atm.services import BankLedger, CardAuthorizer, CashDepot
from src.config import settings
from src.errors import (
    AtmConfigurationError,
    CardAuthorizationFailed,
    InsufficientFunds,
    MoneyDepotError,
    WithdrawalError,
    WrongMoneyAmount,
)
from src.models import AuthenticationToken, Card, Money, Payment
from src.utils.logging import AuditLogger, get_logger
from src.utils.session import reset_current_transaction_id, set_current_transaction_id


logger = get_logger("atm", settings.log_level)


class AtmMachine:
    """Cash withdrawal: authorize the card, charge the bank, dispense notes.

    Once the card is authorized, a failed charge or release is compensated
    by aborting the bank operation before the error reaches the caller.
    The machine keeps no state between withdrawals, so one instance can
    serve any number of them in sequence. It is not safe to call
    ``withdraw`` concurrently on the same instance.
    """

    def __init__(
        self,
        card_authorizer: CardAuthorizer,
        bank_ledger: BankLedger,
        cash_depot: CashDepot,
        *,
        denominations: DenominationTable | None = None,
        audit_logger: AuditLogger | None = None,
    ):
        """Initialize the ATM.

        Args:
            card_authorizer: Service that authorizes cards
            bank_ledger: Bank that is charged for the withdrawal
            cash_depot: Depot that physically releases the notes
            denominations: Note values per currency (uses settings if not provided)
            audit_logger: Audit trail writer (uses settings if not provided)

        Raises:
            AtmConfigurationError: If any of the three services is missing
                or does not implement its interface
        """
        services = {
            "card_authorizer": (card_authorizer, CardAuthorizer),
            "bank_ledger": (bank_ledger, BankLedger),
            "cash_depot": (cash_depot, CashDepot),
        }
        missing = [name for name, (service, _) in services.items() if service is None]
        if missing:
            raise AtmConfigurationError(f"ATM cannot be built without: {', '.join(missing)}")
        invalid = [
            name for name, (service, interface) in services.items()
            if not isinstance(service, interface)
        ]
        if invalid:
            raise AtmConfigurationError(
                f"Services do not implement their interface: {', '.join(invalid)}"
            )

        self.card_authorizer = card_authorizer
        self.bank_ledger = bank_ledger
        self.cash_depot = cash_depot
        self.denominations = denominations or DenominationTable.from_settings()
        self.audit_logger = audit_logger or AuditLogger(
            log_dir=settings.audit_log_dir,
            atm_id=settings.atm_id,
            use_presidio=settings.mask_with_presidio,
        )

        logger.info(
            f"Initialized AtmMachine for currencies "
            f"{[currency.value for currency in self.denominations.currencies]}"
        )

    def withdraw(self, money: Money, card: Card) -> Payment:
        """Withdraw money with the given card.

        Args:
            money: Amount and currency to pay out
            card: Card presented by the customer

        Returns:
            Payment holding the dispensed notes

        Raises:
            WrongMoneyAmount: Negative amount or one the notes cannot make up
            CardAuthorizationFailed: The card was not authorized
            InsufficientFunds: The bank declined the charge
            MoneyDepotError: The depot could not release the notes
        """
        transaction_id = str(uuid4())
        context_token = set_current_transaction_id(transaction_id)
        try:
            return self._withdraw(money, card)
        except WithdrawalError as e:
            e.transaction_id = transaction_id
            self.audit_logger.log_withdrawal_failed(type(e).__name__, str(e))
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error in withdrawal {transaction_id}: "
                f"{self.audit_logger.mask_text(str(e))}"
            )
            self.audit_logger.log_withdrawal_failed(type(e).__name__, str(e))
            raise
        finally:
            reset_current_transaction_id(context_token)

    def _withdraw(self, money: Money, card: Card) -> Payment:
        self.audit_logger.log_withdrawal_started(card.card_number, money.to_display_dict())

        if money.amount < 0:
            raise WrongMoneyAmount(f"Cannot withdraw a negative amount: {money}", money=money)

        token = self.card_authorizer.authorize(card)
        self.audit_logger.log_authorization(token is not None)
        if token is None:
            raise CardAuthorizationFailed(
                f"Card {card.masked_number} was not authorized", money=money
            )

        # Nothing has been charged yet, so a bad amount needs no abort
        payment = Payment(notes=tuple(self.denominations.breakdown(money)))

        try:
            charged = self.bank_ledger.charge(token, money)
            self.audit_logger.log_charge(charged, money.to_display_dict())
        except Exception:
            self._abort(token, "charge error")
            raise
        if not charged:
            abort_error = self._abort(token, "declined charge")
            raise InsufficientFunds(
                f"Bank declined the charge of {money}", money=money
            ) from abort_error

        # Notes that left the depot are paid for, so no abort after a release
        released = False
        try:
            released = self.cash_depot.release_banknotes(list(payment.notes))
            self.audit_logger.log_release(released, payment.to_display_dict()["notes"])
        except Exception:
            if not released:
                self._abort(token, "release error")
            raise
        if not released:
            abort_error = self._abort(token, "failed release")
            raise MoneyDepotError(
                f"Cash depot could not release {money}", money=money
            ) from abort_error

        self.audit_logger.log_withdrawal_completed(payment.to_display_dict())
        return payment

    def _abort(self, token: AuthenticationToken, reason: str) -> Exception | None:
        """Abort the bank operation made with the token.

        A failing abort is logged and returned so the caller can chain it
        to the error of the step that failed.
        """
        try:
            self.bank_ledger.abort(token)
        except Exception as e:
            self.audit_logger.log_abort(reason, error=str(e))
            return e
        self.audit_logger.log_abort(reason)
        return None
