"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from bank_ops.clock import FixedClock
from bank_ops.models import CheckingAccount, Client, SavingsAccount
from bank_ops.services import OperationService
from bank_ops.store import InMemoryAccountRepository, InMemoryTransactionLogger


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def start_time() -> datetime:
    """First timestamp handed out by the test clock."""
    return datetime(2024, 1, 15, 10, 0, 0)


@pytest.fixture
def clock(start_time: datetime) -> FixedClock:
    """Clock advancing one second per call."""
    return FixedClock(start_time, step=timedelta(seconds=1))


@pytest.fixture
def client() -> Client:
    """Sample client."""
    return Client(
        name="Ralf da Silva",
        national_id="000.111.222-33",
        address="Rua A, 10",
        phone="(51) 90000-0001",
    )


@pytest.fixture
def other_client() -> Client:
    """Second sample client."""
    return Client(
        name="Thiago Rech",
        national_id="444.555.666-77",
        address="Rua B, 20",
        phone="(51) 90000-0002",
    )


@pytest.fixture
def checking(client: Client) -> CheckingAccount:
    """Checking account "A": balance 200, overdraft 500."""
    return CheckingAccount("A", client, Decimal("200"), overdraft_limit=Decimal("500"))


@pytest.fixture
def savings(other_client: Client) -> SavingsAccount:
    """Savings account "B": balance 1000, monthly yield 0.6%."""
    return SavingsAccount("B", other_client, Decimal("1000"), monthly_yield_rate=Decimal("0.006"))


@pytest.fixture
def repository(checking: CheckingAccount, savings: SavingsAccount) -> InMemoryAccountRepository:
    """Repository holding accounts A and B."""
    repo = InMemoryAccountRepository()
    repo.add(checking)
    repo.add(savings)
    return repo


@pytest.fixture
def transaction_logger() -> InMemoryTransactionLogger:
    """Empty transaction log."""
    return InMemoryTransactionLogger()


@pytest.fixture
def service(
    repository: InMemoryAccountRepository,
    transaction_logger: InMemoryTransactionLogger,
    clock: FixedClock,
) -> OperationService:
    """Operation service wired to the test repository, log and clock."""
    return OperationService(repository, transaction_logger, clock)
