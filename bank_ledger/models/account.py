"""Account snapshot model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import AccountType
from bank_ledger.models.transaction import Transaction


@dataclass(frozen=True)
class Account:
    """Read-only view of a ledger account at a point in time.

    The ledger hands these out instead of its internal records, so
    changing a snapshot can never bypass balance checks.
    """

    account_number: str
    account_holder: str
    account_type: AccountType
    balance: Decimal
    created_date: datetime
    transaction_history: tuple[Transaction, ...] = ()

    @property
    def last_transaction(self) -> Transaction | None:
        """Most recent transaction, if any."""
        return self.transaction_history[-1] if self.transaction_history else None

    @property
    def transaction_count(self) -> int:
        return len(self.transaction_history)
