"""Aggregate statistics over the ledger."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountType
from bank_ledger.models.money import CENT, ZERO


@dataclass(frozen=True)
class BankStats:
    """Totals computed on demand from the live account set."""

    total_accounts: int
    total_balance: Decimal
    accounts_by_type: dict[AccountType, int] = field(
        default_factory=lambda: {account_type: 0 for account_type in AccountType}
    )

    @property
    def savings_accounts(self) -> int:
        return self.accounts_by_type.get(AccountType.SAVINGS, 0)

    @property
    def checking_accounts(self) -> int:
        return self.accounts_by_type.get(AccountType.CHECKING, 0)

    @property
    def business_accounts(self) -> int:
        return self.accounts_by_type.get(AccountType.BUSINESS, 0)

    @property
    def average_balance(self) -> Decimal:
        """Mean balance per account, zero for an empty ledger."""
        if self.total_accounts == 0:
            return ZERO
        return (self.total_balance / self.total_accounts).quantize(CENT, rounding=ROUND_HALF_UP)

    @classmethod
    def from_accounts(cls, accounts: Iterable[Account]) -> "BankStats":
        """Aggregate a single set of account snapshots."""
        by_type = {account_type: 0 for account_type in AccountType}
        total = ZERO
        count = 0
        for account in accounts:
            by_type[account.account_type] += 1
            total += account.balance
            count += 1
        return cls(total_accounts=count, total_balance=total, accounts_by_type=by_type)
