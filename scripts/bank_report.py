#!/usr/bin/env python3
"""Build a demo ledger and export a report.

Seeds an in-memory ledger (the fixed demo accounts and, optionally,
Faker-generated ones), applies any postings given on the command line,
and writes accounts, transactions and the report to the console or to
JSON files.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.app import build_ledger
from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import BankLedgerError
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.reports import build_report
from bank_ledger.sinks import ConsoleSink, JsonFileSink

logger = get_logger(__name__)


def parse_posting(value: str) -> tuple[str, str, str]:
    """Parse ``ACCOUNT:deposit:AMOUNT`` or ``ACCOUNT:withdraw:AMOUNT``."""
    parts = value.split(":")
    if len(parts) != 3 or parts[1] not in ("deposit", "withdraw"):
        raise argparse.ArgumentTypeError(
            f"Invalid posting {value!r}, expected ACCOUNT:deposit|withdraw:AMOUNT"
        )
    return parts[0], parts[1], parts[2]


def main() -> int:
    """Main entry point."""
    env_config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Build a demo bank ledger and export a report")
    parser.add_argument(
        "--random-accounts",
        type=int,
        default=env_config.random_accounts,
        help="Number of Faker-generated accounts to add (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=env_config.seed,
        help="Random seed for reproducible generated accounts",
    )
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="Start without the fixed demo accounts",
    )
    parser.add_argument(
        "--posting",
        type=parse_posting,
        action="append",
        default=[],
        metavar="ACCOUNT:deposit|withdraw:AMOUNT",
        help="Apply a deposit or withdrawal before reporting (repeatable)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write JSON files here instead of printing to the console",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON files")
    parser.add_argument("--top", type=int, default=5, help="Accounts in top/recent lists (default: 5)")
    parser.add_argument("--log-level", default=env_config.log_level, help="Log level (default: INFO)")
    args = parser.parse_args()

    config = LedgerConfig(
        output=env_config.output,
        load_sample_data=env_config.load_sample_data and not args.no_sample_data,
        random_accounts=args.random_accounts,
        seed=args.seed,
        log_level=args.log_level,
        log_format=env_config.log_format,
        locale=env_config.locale,
    )

    try:
        config.validate()
    except BankLedgerError as exc:
        parser.error(str(exc))

    setup_logging(config.log_level, config.log_format)
    ledger = build_ledger(config)

    failures = 0
    for account_number, action, amount in args.posting:
        try:
            if action == "deposit":
                tx = ledger.post_deposit(account_number, amount)
            else:
                tx = ledger.post_withdrawal(account_number, amount)
            logger.info("%s -> balance %s", tx.description, tx.balance_after)
        except BankLedgerError as exc:
            logger.error("Posting %s:%s:%s failed: %s", account_number, action, amount, exc)
            failures += 1

    accounts = ledger.get_all_accounts()
    transactions = [tx for account in accounts for tx in account.transaction_history]
    report = build_report(ledger, limit=args.top)

    if args.output_dir is not None:
        sink = JsonFileSink(args.output_dir, pretty=args.pretty or config.output.pretty_json)
    else:
        sink = ConsoleSink()

    sink.write_batch("accounts", accounts)
    sink.write_batch("transactions", transactions)
    sink.write_batch("report", [report])
    sink.close()

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
