"""Sample bank scenario wiring the core components with demo data."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from bank_ops.clock import Clock, SystemClock
from bank_ops.config import SampleDataConfig
from bank_ops.generators import AccountGenerator, ClientGenerator
from bank_ops.models import Account, CheckingAccount, Client, SavingsAccount
from bank_ops.services import OperationService
from bank_ops.store import InMemoryAccountRepository, InMemoryTransactionLogger

logger = logging.getLogger(__name__)


@dataclass
class SampleBank:
    """A fully wired bank ready for operations."""

    repository: InMemoryAccountRepository
    transaction_logger: InMemoryTransactionLogger
    clock: Clock
    service: OperationService
    clients: list[Client] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)


class SampleBankScenario:
    """Build sample banks for demos and tests.

    ``build`` always produces the same three clients and accounts:

    - 0001-CC: checking, balance 200, overdraft 500
    - 0002-CP: savings, balance 1000, yield 0.6% per month
    - 0003-CC: checking, balance 50, overdraft 300

    ``build_random`` draws clients and accounts from the generators instead.
    """

    def __init__(
        self,
        config: SampleDataConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the scenario.

        Parameters
        ----------
        config : SampleDataConfig | None
            Sizes, seed and defaults for random builds.
        clock : Clock | None
            Timestamp source handed to the service (wall clock if omitted).
        """
        self.config = config or SampleDataConfig()
        self.clock = clock or SystemClock()

    def build(self) -> SampleBank:
        """Build the fixed demo bank."""
        clients = [
            Client("Ralf da Silva", "000.111.222-33", "Rua A, 10", "(51) 90000-0001"),
            Client("Thiago Rech", "444.555.666-77", "Rua B, 20", "(51) 90000-0002"),
            Client("Thomás Moojen", "111.222.333-44", "Rua C, 30", "(51) 90000-0003"),
        ]
        accounts: list[Account] = [
            CheckingAccount("0001-CC", clients[0], Decimal("200"), overdraft_limit=Decimal("500")),
            SavingsAccount("0002-CP", clients[1], Decimal("1000"), monthly_yield_rate=Decimal("0.006")),
            CheckingAccount("0003-CC", clients[2], Decimal("50"), overdraft_limit=Decimal("300")),
        ]
        return self._assemble(clients, accounts)

    def build_random(self) -> SampleBank:
        """Build a bank from generated clients and accounts."""
        cfg = self.config
        client_gen = ClientGenerator(seed=cfg.seed, locale=cfg.locale)
        account_gen = AccountGenerator(
            seed=cfg.seed,
            locale=cfg.locale,
            overdraft_limit=cfg.default_overdraft,
            monthly_yield_rate=cfg.default_yield_rate,
        )

        clients = list(client_gen.generate_batch(cfg.num_clients))
        accounts = [
            account
            for client in clients
            for account in account_gen.generate_for_client(client)
        ]
        return self._assemble(clients, accounts)

    def _assemble(self, clients: list[Client], accounts: list[Account]) -> SampleBank:
        repository = InMemoryAccountRepository()
        transaction_logger = InMemoryTransactionLogger()
        service = OperationService(repository, transaction_logger, self.clock)

        for account in accounts:
            repository.add(account)

        logger.info("Sample bank ready: %d clients, %d accounts", len(clients), len(accounts))
        return SampleBank(
            repository=repository,
            transaction_logger=transaction_logger,
            clock=self.clock,
            service=service,
            clients=clients,
            accounts=accounts,
        )
