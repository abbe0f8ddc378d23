"""Banking domain models."""

from bank_ops.models.account import (
    Account,
    CheckingAccount,
    SavingsAccount,
    to_amount,
)
from bank_ops.models.client import Client
from bank_ops.models.enums import AccountKind, TransactionKind
from bank_ops.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountKind",
    "CheckingAccount",
    "Client",
    "SavingsAccount",
    "Transaction",
    "TransactionKind",
    "to_amount",
]
