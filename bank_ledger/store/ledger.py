"""In-memory account ledger: the single authority over balances."""

import itertools
import threading
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankLedgerError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAccountError,
    InvalidAmountError,
)
from bank_ledger.logging import get_logger
from bank_ledger.models import (
    MAX_AMOUNT,
    ZERO,
    Account,
    AccountType,
    BankStats,
    Transaction,
    TransactionType,
    to_amount,
)

logger = get_logger(__name__)


@dataclass
class _AccountRecord:
    """Mutable account state; never leaves the ledger."""

    account_number: str
    account_holder: str
    account_type: AccountType
    balance: Decimal
    created_date: datetime
    history: list[Transaction] = field(default_factory=list)

    def snapshot(self) -> Account:
        return Account(
            account_number=self.account_number,
            account_holder=self.account_holder,
            account_type=self.account_type,
            balance=self.balance,
            created_date=self.created_date,
            transaction_history=tuple(self.history),
        )


class Ledger:
    """Registry of accounts keyed by account number.

    Every public method runs under one re-entrant lock, so each
    operation is applied whole or not at all with respect to any
    other caller. Callers get frozen ``Account`` and ``Transaction``
    snapshots back, never the records the ledger mutates.

    Two flavours of the mutating API are provided:

    - ``open_account``, ``post_deposit`` and ``post_withdrawal`` raise
      a ``BankLedgerError`` subclass on rejection.
    - ``create_account``, ``deposit`` and ``withdraw`` return ``True``
      or ``False`` and log the reason for a rejection.

    Parameters
    ----------
    clock : Callable[[], datetime]
        Source of timestamps for accounts and transactions.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._accounts: dict[str, _AccountRecord] = {}
        self._lock = threading.RLock()
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        if not isinstance(account_number, str):
            return False
        with self._lock:
            return _normalize(account_number) in self._accounts

    # Raising API
    def open_account(
        self,
        account_number: str,
        account_holder: str,
        initial_balance: Decimal | int | float | str = ZERO,
        account_type: AccountType | str = AccountType.SAVINGS,
    ) -> Account:
        """Open a new account and record its opening balance.

        Raises
        ------
        InvalidAccountError
            If the number or holder is blank, or the type is unknown.
        InvalidAmountError
            If the initial balance is negative or not a number.
        DuplicateAccountError
            If the account number is already in use.
        """
        number = _normalize(account_number)
        holder = (account_holder or "").strip()
        if not number:
            raise InvalidAccountError("Account number is required")
        if not holder:
            raise InvalidAccountError(f"Account holder is required for {number}")

        kind = AccountType.parse(account_type)
        balance = to_amount(initial_balance)
        if balance < ZERO:
            raise InvalidAmountError(f"Initial balance for {number} cannot be negative: {balance}")

        with self._lock:
            if number in self._accounts:
                raise DuplicateAccountError(f"Account {number} already exists")

            record = _AccountRecord(
                account_number=number,
                account_holder=holder,
                account_type=kind,
                balance=balance,
                created_date=self._clock(),
            )
            created = self._append(
                record,
                TransactionType.CREATED,
                balance,
                f"Account created with initial balance: ${balance}",
            )
            self._accounts[number] = record
            logger.info(
                "Opened %s account %s for %s",
                kind.value,
                number,
                holder,
                extra=_log_context(created),
            )
            return record.snapshot()

    def post_deposit(self, account_number: str, amount: Decimal | int | float | str) -> Transaction:
        """Credit an account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        InvalidAmountError
            If the amount is not strictly positive, or the new balance
            would exceed ``MAX_AMOUNT``.
        """
        value = self._positive_amount(account_number, amount)
        with self._lock:
            record = self._get_record(account_number)
            if record.balance + value > MAX_AMOUNT:
                raise InvalidAmountError(
                    f"Deposit of {value} would take {record.account_number} above {MAX_AMOUNT}"
                )
            record.balance += value
            tx = self._append(record, TransactionType.DEPOSIT, value, f"Deposited: ${value}")
            logger.debug(
                "Deposited %s into %s, balance %s",
                value,
                record.account_number,
                record.balance,
                extra=_log_context(tx),
            )
            return tx

    def post_withdrawal(self, account_number: str, amount: Decimal | int | float | str) -> Transaction:
        """Debit an account; the balance may reach zero but never go below it.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        InvalidAmountError
            If the amount is not strictly positive.
        InsufficientFundsError
            If the amount exceeds the current balance.
        """
        value = self._positive_amount(account_number, amount)
        with self._lock:
            record = self._get_record(account_number)
            if value > record.balance:
                raise InsufficientFundsError(
                    f"Insufficient funds in {record.account_number}: "
                    f"balance {record.balance}, requested {value}"
                )
            record.balance -= value
            tx = self._append(record, TransactionType.WITHDRAWAL, value, f"Withdrawn: ${value}")
            logger.debug(
                "Withdrew %s from %s, balance %s",
                value,
                record.account_number,
                record.balance,
                extra=_log_context(tx),
            )
            return tx

    def require_account(self, account_number: str) -> Account:
        """Return a snapshot of an account or raise ``AccountNotFoundError``."""
        with self._lock:
            return self._get_record(account_number).snapshot()

    def get_transactions(self, account_number: str) -> list[Transaction]:
        """Return an account's transactions, oldest first."""
        with self._lock:
            return list(self._get_record(account_number).history)

    # Boolean API
    def create_account(
        self,
        account_number: str,
        account_holder: str,
        initial_balance: Decimal | int | float | str = ZERO,
        account_type: AccountType | str = AccountType.SAVINGS,
    ) -> bool:
        """Open an account, returning False instead of raising."""
        try:
            self.open_account(account_number, account_holder, initial_balance, account_type)
        except BankLedgerError as exc:
            logger.warning("Account creation rejected: %s", exc)
            return False
        return True

    def deposit(self, account_number: str, amount: Decimal | int | float | str) -> bool:
        """Deposit funds, returning False instead of raising."""
        try:
            self.post_deposit(account_number, amount)
        except BankLedgerError as exc:
            logger.warning("Deposit rejected: %s", exc)
            return False
        return True

    def withdraw(self, account_number: str, amount: Decimal | int | float | str) -> bool:
        """Withdraw funds, returning False instead of raising."""
        try:
            self.post_withdrawal(account_number, amount)
        except BankLedgerError as exc:
            logger.warning("Withdrawal rejected: %s", exc)
            return False
        return True

    # Queries
    def get_account(self, account_number: str) -> Account | None:
        """Return a snapshot of an account, or None if the number is unknown."""
        with self._lock:
            record = self._accounts.get(_normalize(account_number))
            return record.snapshot() if record else None

    def get_all_accounts(self) -> list[Account]:
        """Return all accounts in the order they were opened."""
        with self._lock:
            return [record.snapshot() for record in self._accounts.values()]

    def search_accounts(self, term: str) -> list[Account]:
        """Find accounts whose number or holder contains ``term`` (case-insensitive)."""
        needle = (term or "").strip().lower()
        return [
            account
            for account in self.get_all_accounts()
            if needle in account.account_number.lower() or needle in account.account_holder.lower()
        ]

    def get_stats(self) -> BankStats:
        """Recompute totals and per-type counts over the current accounts."""
        return BankStats.from_accounts(self.get_all_accounts())

    def summary(self) -> dict[str, int]:
        """Return counts of accounts and transactions."""
        with self._lock:
            return {
                "accounts": len(self._accounts),
                "transactions": sum(len(r.history) for r in self._accounts.values()),
            }

    # Internals
    def _get_record(self, account_number: str) -> _AccountRecord:
        number = _normalize(account_number)
        record = self._accounts.get(number)
        if record is None:
            raise AccountNotFoundError(f"Account {number} not found")
        return record

    def _positive_amount(self, account_number: str, amount: Decimal | int | float | str) -> Decimal:
        value = to_amount(amount)
        if value <= ZERO:
            raise InvalidAmountError(f"Amount for {account_number} must be positive: {value}")
        return value

    def _append(
        self,
        record: _AccountRecord,
        transaction_type: TransactionType,
        amount: Decimal,
        description: str,
    ) -> Transaction:
        tx = Transaction(
            transaction_id=f"TXN{next(self._ids):08d}",
            account_number=record.account_number,
            transaction_type=transaction_type,
            amount=amount,
            description=description,
            balance_after=record.balance,
            timestamp=self._clock(),
        )
        record.history.append(tx)
        return tx


def _normalize(account_number: str | None) -> str:
    """Canonical form of an account number, used for storage and lookup."""
    return (account_number or "").strip()


def _log_context(tx: Transaction) -> dict[str, object]:
    return {
        "account_number": tx.account_number,
        "transaction_id": tx.transaction_id,
        "transaction_type": tx.transaction_type.value,
        "amount": tx.amount,
        "balance": tx.balance_after,
    }
