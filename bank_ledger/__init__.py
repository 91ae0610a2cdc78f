"""In-memory bank account ledger."""

from bank_ledger.app import build_ledger
from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankLedgerError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAccountError,
    InvalidAmountError,
)
from bank_ledger.models import Account, AccountType, BankStats, Transaction, TransactionType
from bank_ledger.store import Ledger

__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountType",
    "BankLedgerError",
    "BankStats",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidAccountError",
    "InvalidAmountError",
    "Ledger",
    "LedgerConfig",
    "Transaction",
    "TransactionType",
    "build_ledger",
]
