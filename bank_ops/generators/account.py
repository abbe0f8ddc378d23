"""Account generator."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from bank_ops.generators.base import BaseGenerator
from bank_ops.models import Account, AccountKind, CheckingAccount, Client, SavingsAccount


class AccountGenerator(BaseGenerator):
    """Generate sample accounts with sequential numbers.

    Numbers follow ``NNNN-CC`` for checking and ``NNNN-CP`` for savings.
    Roughly 70% of generated accounts are checking accounts.
    """

    KINDS = list(AccountKind)
    KIND_WEIGHTS = [0.70, 0.30]
    SUFFIXES = {AccountKind.CHECKING: "CC", AccountKind.SAVINGS: "CP"}

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        overdraft_limit: Decimal = Decimal("500"),
        monthly_yield_rate: Decimal = Decimal("0.006"),
        start: int = 1,
    ) -> None:
        super().__init__(seed, locale)
        self.overdraft_limit = overdraft_limit
        self.monthly_yield_rate = monthly_yield_rate
        self._next_number = start

    def generate(self, owner: Client, kind: AccountKind | None = None) -> Account:
        """Generate one account for ``owner``.

        Parameters
        ----------
        owner : Client
            Account holder.
        kind : AccountKind | None
            Account kind; drawn at random when omitted.

        Returns
        -------
        Account
            A checking or savings account.
        """
        if kind is None:
            kind = self.rng.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]

        number = f"{self._next_number:04d}-{self.SUFFIXES[kind]}"
        self._next_number += 1
        balance = Decimal(str(round(self.rng.uniform(0, 5000), 2)))

        if kind == AccountKind.CHECKING:
            return CheckingAccount(number, owner, balance, overdraft_limit=self.overdraft_limit)
        return SavingsAccount(number, owner, balance, monthly_yield_rate=self.monthly_yield_rate)

    def generate_for_client(self, owner: Client) -> Iterator[Account]:
        """Generate one or two accounts for a client."""
        num_accounts = self.rng.choices([1, 2], weights=[0.7, 0.3], k=1)[0]
        yield self.generate(owner, AccountKind.CHECKING)
        if num_accounts == 2:
            yield self.generate(owner, AccountKind.SAVINGS)
