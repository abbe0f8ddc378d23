"""Account operation service."""

import logging
from decimal import Decimal
from typing import Any

from bank_ops.clock import Clock
from bank_ops.exceptions import BankError
from bank_ops.models import Transaction, TransactionKind, to_amount
from bank_ops.store import AccountRepository, TransactionLogger

logger = logging.getLogger(__name__)


class OperationService:
    """Single entry point for balance-changing operations.

    Looks accounts up in the repository, lets the account enforce its
    rules, then records one transaction per successful operation. A
    rejected operation raises before anything is recorded.

    Parameters
    ----------
    repository : AccountRepository
        Source of accounts by number.
    transaction_logger : TransactionLogger
        Destination for completed transactions.
    clock : Clock
        Timestamp source for new transactions.
    """

    def __init__(
        self,
        repository: AccountRepository,
        transaction_logger: TransactionLogger,
        clock: Clock,
    ) -> None:
        self.repository = repository
        self.transaction_logger = transaction_logger
        self.clock = clock
        self._next_id = 1

    def deposit(self, account_number: str, amount: Any) -> Transaction:
        """Deposit into an account and record a DEPOSIT transaction."""
        try:
            account = self.repository.get(account_number)
            account.deposit(amount)
        except BankError as exc:
            self._rejected(TransactionKind.DEPOSIT, account_number, exc)
            raise
        return self._record(TransactionKind.DEPOSIT, to_amount(amount), account_number)

    def withdraw(self, account_number: str, amount: Any) -> Transaction:
        """Withdraw from an account and record a WITHDRAW transaction."""
        try:
            account = self.repository.get(account_number)
            account.withdraw(amount)
        except BankError as exc:
            self._rejected(TransactionKind.WITHDRAW, account_number, exc)
            raise
        return self._record(TransactionKind.WITHDRAW, to_amount(amount), account_number)

    def transfer(self, from_number: str, to_number: str, amount: Any) -> Transaction:
        """Move funds between two accounts and record a TRANSFER transaction.

        Both accounts are looked up before either balance changes.
        """
        try:
            source = self.repository.get(from_number)
            target = self.repository.get(to_number)
            source.transfer(target, amount)
        except BankError as exc:
            self._rejected(TransactionKind.TRANSFER, from_number, exc)
            raise
        return self._record(TransactionKind.TRANSFER, to_amount(amount), from_number, to_number)

    def history(self) -> list[Transaction]:
        """All recorded transactions, oldest first."""
        return self.transaction_logger.all()

    def _record(
        self,
        kind: TransactionKind,
        amount: Decimal,
        source: str,
        destination: str | None = None,
    ) -> Transaction:
        transaction = Transaction(
            id=self._next_id,
            timestamp=self.clock.now(),
            amount=amount,
            kind=kind,
            source_account=source,
            destination_account=destination,
        )
        self.transaction_logger.append(transaction)
        self._next_id += 1
        logger.info(
            "Transaction %d: %s %s on %s%s",
            transaction.id,
            kind.value,
            amount,
            source,
            f" -> {destination}" if destination else "",
            extra={"extra": {"transaction_id": transaction.id, "kind": kind.value}},
        )
        return transaction

    @staticmethod
    def _rejected(kind: TransactionKind, account_number: str, exc: BankError) -> None:
        logger.warning(
            "%s on %s rejected: %s",
            kind.value,
            account_number,
            exc,
            extra={"extra": {"kind": kind.value, "error": type(exc).__name__}},
        )
