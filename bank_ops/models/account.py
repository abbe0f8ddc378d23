"""Account models for the banking domain.

Two account kinds share one contract:

- CHECKING: may draw below zero up to ``overdraft_limit``
- SAVINGS: never below zero, grows by ``monthly_yield_rate`` per month
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Any, ClassVar

from bank_ops.exceptions import InsufficientFundsError, InvalidArgumentError
from bank_ops.models.client import Client
from bank_ops.models.enums import AccountKind

ZERO = Decimal("0")


def to_amount(value: Any) -> Decimal:
    """Convert a monetary input to ``Decimal``.

    Parameters
    ----------
    value : Any
        Decimal, int, float or numeric string.

    Returns
    -------
    Decimal
        The value as a finite Decimal.

    Raises
    ------
    InvalidArgumentError
        If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    return amount



@dataclass(eq=False)
class Account(ABC):
    """Bank account holding a balance for one client.

    Instances compare by identity: two accounts are the same account only
    if they are the same object. Balance arithmetic is exact; an operation
    whose result would need rounding is rejected.
    """

    KIND: ClassVar[AccountKind]

    number: str
    owner: Client
    balance: Decimal = ZERO
    kind: AccountKind = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.number, str) or not self.number.strip():
            raise InvalidArgumentError("Account number cannot be empty")
        self.balance = max(ZERO, to_amount(self.balance))
        self.kind = self.KIND

    @property
    @abstractmethod
    def available_funds(self) -> Decimal:
        """Largest amount a withdrawal may take."""

    def deposit(self, amount: Any) -> None:
        value = self._positive(amount, "Deposit")
        self.balance = self._exact_sum(self.balance, value)

    def withdraw(self, amount: Any) -> None:
        value = self._positive(amount, "Withdrawal")
        if value > self.available_funds:
            raise InsufficientFundsError(
                f"Account {self.number}: withdrawal of {value} exceeds available funds "
                f"{self.available_funds}"
            )
        self.balance = self._exact_sum(self.balance, -value)

    def transfer(self, target: "Account", amount: Any) -> None:
        """Move ``amount`` from this account to ``target``.

        The credit to ``target`` is checked before the withdrawal runs, and
        the withdrawal runs before the deposit, so a rejected transfer
        leaves both balances untouched.
        """
        if target is self:
            raise InvalidArgumentError(f"Account {self.number}: cannot transfer to itself")
        value = self._positive(amount, "Transfer")
        target._exact_sum(target.balance, value)
        self.withdraw(value)
        target.deposit(value)

    def _positive(self, amount: Any, operation: str) -> Decimal:
        value = to_amount(amount)
        if value <= ZERO:
            raise InvalidArgumentError(
                f"Account {self.number}: {operation.lower()} amount must be positive, got {value}"
            )
        return value

    def _exact_sum(self, balance: Decimal, delta: Decimal) -> Decimal:
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                return balance + delta
            except Inexact:
                raise InvalidArgumentError(
                    f"Account {self.number}: amount {abs(delta)} exceeds balance precision"
                ) from None


@dataclass(eq=False)
class CheckingAccount(Account):
    """Checking account with an overdraft allowance."""

    KIND: ClassVar[AccountKind] = AccountKind.CHECKING

    overdraft_limit: Decimal = ZERO

    def __post_init__(self) -> None:
        super().__post_init__()
        self.overdraft_limit = to_amount(self.overdraft_limit)
        if self.overdraft_limit < ZERO:
            raise InvalidArgumentError(
                f"Account {self.number}: overdraft limit must be non-negative"
            )

    @property
    def available_funds(self) -> Decimal:
        return self.balance + self.overdraft_limit


@dataclass(eq=False)
class SavingsAccount(Account):
    """Savings account with a monthly yield."""

    KIND: ClassVar[AccountKind] = AccountKind.SAVINGS

    monthly_yield_rate: Decimal = ZERO

    def __post_init__(self) -> None:
        super().__post_init__()
        self.monthly_yield_rate = to_amount(self.monthly_yield_rate)
        if self.monthly_yield_rate < ZERO:
            raise InvalidArgumentError(
                f"Account {self.number}: monthly yield rate must be non-negative"
            )

    @property
    def available_funds(self) -> Decimal:
        return self.balance

    def apply_yield(self, months: int = 1) -> None:
        """Compound the balance by the monthly rate for ``months`` months.

        Does nothing when ``months`` is less than 1. The result follows the
        default decimal context and may be rounded.
        """
        if months < 1:
            return
        self.balance *= (1 + self.monthly_yield_rate) ** months
