"""Application services coordinating accounts and history."""

from bank_ops.services.operations import OperationService

__all__ = ["OperationService"]
