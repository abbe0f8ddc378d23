"""Account repository keyed by account number."""

from dataclasses import dataclass, field
from typing import Protocol

from bank_ops.exceptions import AccountNotFoundError
from bank_ops.models import Account, Client


class AccountRepository(Protocol):
    def add(self, account: Account) -> None: ...
    def remove(self, number: str) -> None: ...
    def get(self, number: str) -> Account: ...
    def all(self) -> list[Account]: ...


@dataclass
class InMemoryAccountRepository:
    """In-memory account store.

    ``add`` replaces any account already stored under the same number.
    Iteration follows insertion order.
    """

    _accounts: dict[str, Account] = field(default_factory=dict)

    def add(self, account: Account) -> None:
        """Add or replace an account."""
        self._accounts[account.number] = account

    def remove(self, number: str) -> None:
        """Remove an account; unknown numbers are ignored."""
        self._accounts.pop(number, None)

    def get(self, number: str) -> Account:
        """Return the stored account.

        Raises
        ------
        AccountNotFoundError
            If no account is stored under ``number``.
        """
        try:
            return self._accounts[number]
        except KeyError:
            raise AccountNotFoundError(f"Account {number} not found") from None

    def all(self) -> list[Account]:
        """Snapshot of all accounts in insertion order."""
        return list(self._accounts.values())

    def owners(self) -> list[Client]:
        """Distinct account owners in order of first appearance.

        Owners are distinct by identity, so two clients with identical
        details are both listed.
        """
        seen: dict[int, Client] = {}
        for account in self._accounts.values():
            seen.setdefault(id(account.owner), account.owner)
        return list(seen.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, number: object) -> bool:
        return number in self._accounts
