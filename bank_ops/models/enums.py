"""Enumeration types for banking entities."""

from enum import Enum


class AccountKind(str, Enum):
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER = "TRANSFER"
