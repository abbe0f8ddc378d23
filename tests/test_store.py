"""Tests for the account repository and transaction log."""

from datetime import datetime
from decimal import Decimal

import pytest

from bank_ops.exceptions import AccountNotFoundError
from bank_ops.models import (
    CheckingAccount,
    Client,
    SavingsAccount,
    Transaction,
    TransactionKind,
)
from bank_ops.store import InMemoryAccountRepository, InMemoryTransactionLogger


@pytest.fixture
def store() -> InMemoryAccountRepository:
    """Create a fresh repository for each test."""
    return InMemoryAccountRepository()


class TestAccountRepository:
    """Tests for InMemoryAccountRepository."""

    def test_add_and_get(self, store: InMemoryAccountRepository, checking: CheckingAccount) -> None:
        store.add(checking)

        assert store.get("A") is checking
        assert "A" in store
        assert len(store) == 1

    def test_get_unknown_fails(self, store: InMemoryAccountRepository) -> None:
        with pytest.raises(AccountNotFoundError, match="Account unknown not found"):
            store.get("unknown")

    def test_add_same_number_replaces(self, store: InMemoryAccountRepository, client: Client) -> None:
        first = SavingsAccount("A", client, Decimal("10"))
        second = SavingsAccount("A", client, Decimal("20"))

        store.add(first)
        store.add(second)

        assert store.get("A") is second
        assert len(store) == 1

    def test_remove(self, repository: InMemoryAccountRepository) -> None:
        repository.remove("A")

        assert "A" not in repository
        with pytest.raises(AccountNotFoundError):
            repository.get("A")

    def test_remove_unknown_is_noop(self, repository: InMemoryAccountRepository) -> None:
        repository.remove("does-not-exist")
        assert len(repository) == 2

    def test_get_returns_live_reference(self, repository: InMemoryAccountRepository) -> None:
        repository.get("A").deposit(Decimal("5"))
        assert repository.get("A").balance == Decimal("205")

    def test_all_in_insertion_order(
        self,
        repository: InMemoryAccountRepository,
        checking: CheckingAccount,
        savings: SavingsAccount,
    ) -> None:
        assert repository.all() == [checking, savings]

    def test_all_is_snapshot(self, repository: InMemoryAccountRepository) -> None:
        snapshot = repository.all()
        repository.remove("A")

        assert len(snapshot) == 2
        assert len(repository.all()) == 1

    def test_all_empty(self, store: InMemoryAccountRepository) -> None:
        assert store.all() == []

    def test_owners_are_distinct(
        self, store: InMemoryAccountRepository, client: Client, other_client: Client
    ) -> None:
        store.add(CheckingAccount("1", client))
        store.add(SavingsAccount("2", client))
        store.add(SavingsAccount("3", other_client))

        assert store.owners() == [client, other_client]

    def test_owners_with_identical_details_are_kept(
        self, store: InMemoryAccountRepository, client: Client
    ) -> None:
        twin = Client(client.name, client.national_id, client.address, client.phone)
        store.add(CheckingAccount("1", client))
        store.add(CheckingAccount("2", twin))
        store.add(SavingsAccount("3", client))

        owners = store.owners()

        assert len(owners) == 2
        assert owners[0] is client
        assert owners[1] is twin


class TestTransactionLogger:
    """Tests for InMemoryTransactionLogger."""

    def _tx(self, tx_id: int, source: str, destination: str | None = None) -> Transaction:
        kind = TransactionKind.TRANSFER if destination else TransactionKind.DEPOSIT
        return Transaction(tx_id, datetime(2024, 1, 1), Decimal("10"), kind, source, destination)

    def test_append_and_all(self, transaction_logger: InMemoryTransactionLogger) -> None:
        first = self._tx(1, "A")
        second = self._tx(2, "B")

        transaction_logger.append(first)
        transaction_logger.append(second)

        assert transaction_logger.all() == [first, second]
        assert len(transaction_logger) == 2

    def test_all_empty(self, transaction_logger: InMemoryTransactionLogger) -> None:
        assert transaction_logger.all() == []

    def test_all_returns_copy(self, transaction_logger: InMemoryTransactionLogger) -> None:
        transaction_logger.append(self._tx(1, "A"))
        transaction_logger.all().clear()

        assert len(transaction_logger.all()) == 1

    def test_for_account(self, transaction_logger: InMemoryTransactionLogger) -> None:
        deposit = self._tx(1, "A")
        other = self._tx(2, "C")
        transfer = self._tx(3, "B", "A")
        for tx in (deposit, other, transfer):
            transaction_logger.append(tx)

        assert transaction_logger.for_account("A") == [deposit, transfer]
        assert transaction_logger.for_account("Z") == []
