#!/usr/bin/env python3
"""Run the demo banking session and print the resulting state.

Builds the sample bank, then:
- deposits 300 into 0001-CC
- withdraws 150 from 0001-CC
- transfers 200 from 0002-CP to 0003-CC
- applies two months of yield to 0002-CP

Clients, accounts and the transaction history are printed as JSON.
"""

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ops.config import BankConfig
from bank_ops.exceptions import BankError
from bank_ops.logging import setup_logging
from bank_ops.models import SavingsAccount
from bank_ops.scenarios import SampleBank, SampleBankScenario
from bank_ops.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def run_demo_operations(bank: SampleBank) -> None:
    """Apply the demo operations to the fixed sample bank."""
    service = bank.service
    service.deposit("0001-CC", Decimal("300"))
    service.withdraw("0001-CC", Decimal("150"))
    service.transfer("0002-CP", "0003-CC", Decimal("200"))

    savings = bank.repository.get("0002-CP")
    if isinstance(savings, SavingsAccount):
        savings.apply_yield(2)


def run_random_operations(bank: SampleBank) -> None:
    """Move a small amount between consecutive generated accounts."""
    accounts = bank.repository.all()
    for source, target in zip(accounts, accounts[1:]):
        try:
            bank.service.transfer(source.number, target.number, Decimal("100"))
        except BankError as exc:
            logger.warning("Skipped transfer %s -> %s: %s", source.number, target.number, exc)


def main() -> None:
    """Main entry point."""
    config = BankConfig.from_env()

    parser = argparse.ArgumentParser(description="Run a demo banking session")
    parser.add_argument(
        "--random",
        action="store_true",
        help="Use generated clients and accounts instead of the fixed demo data",
    )
    parser.add_argument(
        "--clients",
        type=int,
        default=config.sample_data.num_clients,
        help=f"Number of generated clients with --random (default: {config.sample_data.num_clients})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.sample_data.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.logging.level,
        help=f"Log level (default: {config.logging.level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print one JSON object per line",
    )
    args = parser.parse_args()

    setup_logging(
        level=args.log_level,
        format_type="json" if args.json_logs else config.logging.format_type,
    )

    config.sample_data.num_clients = args.clients
    config.sample_data.seed = args.seed
    scenario = SampleBankScenario(config.sample_data)

    if args.random:
        bank = scenario.build_random()
        run_random_operations(bank)
    else:
        bank = scenario.build()
        run_demo_operations(bank)

    sink = ConsoleSink(pretty=not args.compact)
    sink.write_batch("clients", bank.repository.owners())
    sink.write_batch("accounts", bank.repository.all())
    sink.write_batch("transactions", bank.service.history())
    sink.close()


if __name__ == "__main__":
    main()
