"""Derived report figures for dashboards and exports."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from bank_ledger.models import Account, AccountType, BankStats
from bank_ledger.store import Ledger


@dataclass(frozen=True)
class BankReport:
    """Point-in-time overview of the whole ledger."""

    generated_at: datetime
    stats: BankStats
    average_balance: Decimal
    account_type_breakdown: dict[AccountType, int]
    total_transactions: int
    top_accounts: list[Account] = field(default_factory=list)
    recent_accounts: list[Account] = field(default_factory=list)


def average_balance(stats: BankStats) -> Decimal:
    return stats.average_balance


def account_type_breakdown(stats: BankStats) -> dict[AccountType, int]:
    """Per-type counts, omitting types with no accounts."""
    return {
        account_type: stats.accounts_by_type.get(account_type, 0)
        for account_type in AccountType
        if stats.accounts_by_type.get(account_type, 0) > 0
    }


def top_accounts(accounts: Iterable[Account], limit: int = 5) -> list[Account]:
    """Highest balances first."""
    return sorted(accounts, key=lambda a: a.balance, reverse=True)[:limit]


def recent_accounts(accounts: Iterable[Account], limit: int = 5) -> list[Account]:
    """Newest accounts first."""
    return sorted(accounts, key=lambda a: a.created_date, reverse=True)[:limit]


def total_transactions(accounts: Iterable[Account]) -> int:
    return sum(account.transaction_count for account in accounts)


def build_report(ledger: Ledger, limit: int = 5) -> BankReport:
    """Build a report from one consistent read of the ledger.

    Stats, lists and counts all come from a single ``get_all_accounts``
    call.

    Parameters
    ----------
    ledger : Ledger
        Ledger to report on.
    limit : int
        Number of accounts in the top and recent lists.

    Returns
    -------
    BankReport
        Report snapshot.
    """
    accounts = ledger.get_all_accounts()
    stats = BankStats.from_accounts(accounts)
    return BankReport(
        generated_at=datetime.now(),
        stats=stats,
        average_balance=average_balance(stats),
        account_type_breakdown=account_type_breakdown(stats),
        total_transactions=total_transactions(accounts),
        top_accounts=top_accounts(accounts, limit),
        recent_accounts=recent_accounts(accounts, limit),
    )
