"""Domain models for the bank ledger."""

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountType, TransactionType
from bank_ledger.models.money import CENT, MAX_AMOUNT, ZERO, to_amount
from bank_ledger.models.stats import BankStats
from bank_ledger.models.transaction import Transaction

__all__ = [
    "CENT",
    "MAX_AMOUNT",
    "ZERO",
    "Account",
    "AccountType",
    "BankStats",
    "Transaction",
    "TransactionType",
    "to_amount",
]
