"""Sample data generators."""

from bank_ops.generators.account import AccountGenerator
from bank_ops.generators.base import BaseGenerator
from bank_ops.generators.client import ClientGenerator

__all__ = ["AccountGenerator", "BaseGenerator", "ClientGenerator"]
