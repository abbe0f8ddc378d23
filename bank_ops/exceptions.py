"""Custom exception hierarchy for bank-ops."""


class BankError(Exception):
    """Base exception for all bank-ops errors."""


class InvalidArgumentError(BankError):
    """Raised when an operation receives an invalid amount or target."""


class InsufficientFundsError(BankError):
    """Raised when a withdrawal exceeds the funds available to an account."""


class AccountNotFoundError(BankError):
    """Raised when an account number is not present in the repository."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid or missing."""
