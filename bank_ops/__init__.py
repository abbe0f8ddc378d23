"""In-memory banking operations: accounts, transfers and transaction history."""

__version__ = "0.1.0"
