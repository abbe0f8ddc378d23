"""Append-only transaction history."""

from dataclasses import dataclass, field
from typing import Protocol

from bank_ops.models import Transaction


class TransactionLogger(Protocol):
    def append(self, transaction: Transaction) -> None: ...
    def all(self) -> list[Transaction]: ...


@dataclass
class InMemoryTransactionLogger:
    """Keeps transactions in the order they were appended."""

    _items: list[Transaction] = field(default_factory=list)

    def append(self, transaction: Transaction) -> None:
        self._items.append(transaction)

    def all(self) -> list[Transaction]:
        """All transactions, oldest first."""
        return list(self._items)

    def for_account(self, number: str) -> list[Transaction]:
        """Transactions where the account is source or destination."""
        return [t for t in self._items if t.involves(number)]

    def __len__(self) -> int:
        return len(self._items)
