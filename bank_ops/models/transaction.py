"""Transaction model for the banking domain."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ops.exceptions import InvalidArgumentError
from bank_ops.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """Immutable record of one completed account operation."""

    id: int
    timestamp: datetime
    amount: Decimal
    kind: TransactionKind
    source_account: str
    destination_account: str | None = None  # set for transfers only

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or self.id < 1:
            raise InvalidArgumentError(f"Transaction id must be a positive integer, got {self.id!r}")
        if not isinstance(self.amount, Decimal) or self.amount <= 0:
            raise InvalidArgumentError(
                f"Transaction amount must be a positive Decimal, got {self.amount!r}"
            )
        if not self.source_account:
            raise InvalidArgumentError("Transaction source account cannot be empty")

        is_transfer = self.kind == TransactionKind.TRANSFER
        if is_transfer and not self.destination_account:
            raise InvalidArgumentError("Transfer transactions require a destination account")
        if not is_transfer and self.destination_account is not None:
            raise InvalidArgumentError(
                f"{self.kind.value} transactions cannot have a destination account"
            )

    def involves(self, account_number: str) -> bool:
        """Whether the account is the source or destination of this transaction."""
        return account_number in (self.source_account, self.destination_account)
