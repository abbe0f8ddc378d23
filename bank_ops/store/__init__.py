"""In-memory stores for accounts and transaction history."""

from bank_ops.store.accounts import AccountRepository, InMemoryAccountRepository
from bank_ops.store.transactions import InMemoryTransactionLogger, TransactionLogger

__all__ = [
    "AccountRepository",
    "InMemoryAccountRepository",
    "InMemoryTransactionLogger",
    "TransactionLogger",
]
