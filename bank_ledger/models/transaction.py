"""Transaction model for the ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Immutable record of a balance-affecting event.

    ``amount`` is positive for deposits and withdrawals; for the
    ``created`` record it holds the opening balance, which may be zero.
    """

    transaction_id: str
    account_number: str
    transaction_type: TransactionType
    amount: Decimal
    description: str
    balance_after: Decimal  # snapshot, never recomputed
    timestamp: datetime
