"""Tests for domain models."""

import dataclasses
from datetime import datetime
from decimal import Decimal

import pytest

from bank_ledger.exceptions import InvalidAccountError, InvalidAmountError
from bank_ledger.models import (
    MAX_AMOUNT,
    Account,
    AccountType,
    BankStats,
    Transaction,
    TransactionType,
    to_amount,
)


class TestToAmount:
    """Tests for amount conversion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("10"), Decimal("10.00")),
            (5, Decimal("5.00")),
            ("12.5", Decimal("12.50")),
            (" 3.10 ", Decimal("3.10")),
            (0.1, Decimal("0.10")),
            (1.005, Decimal("1.01")),
            ("-4", Decimal("-4.00")),
        ],
    )
    def test_converts_and_quantizes(self, value: object, expected: Decimal) -> None:
        assert to_amount(value) == expected

    def test_result_has_two_places(self) -> None:
        assert to_amount(7).as_tuple().exponent == -2

    @pytest.mark.parametrize("value", ["abc", "", None, True, [1], "NaN", "Infinity", float("inf")])
    def test_rejects_invalid(self, value: object) -> None:
        with pytest.raises(InvalidAmountError):
            to_amount(value)

    @pytest.mark.parametrize("value", ["1e30", "1e27", "-1e27", Decimal("1E+26"), 10**16])
    def test_rejects_oversized(self, value: object) -> None:
        with pytest.raises(InvalidAmountError, match="exceeds"):
            to_amount(value)

    def test_accepts_ceiling(self) -> None:
        assert to_amount(MAX_AMOUNT) == MAX_AMOUNT
        assert to_amount("-999999999999999.99") == -MAX_AMOUNT


class TestAccountType:
    """Tests for AccountType parsing."""

    def test_values(self) -> None:
        assert [t.value for t in AccountType] == ["Savings", "Checking", "Business"]

    @pytest.mark.parametrize(
        "value, expected",
        [
            (AccountType.BUSINESS, AccountType.BUSINESS),
            ("Checking", AccountType.CHECKING),
            ("savings", AccountType.SAVINGS),
            ("BUSINESS", AccountType.BUSINESS),
            (" Checking ", AccountType.CHECKING),
        ],
    )
    def test_parse(self, value: object, expected: AccountType) -> None:
        assert AccountType.parse(value) is expected

    @pytest.mark.parametrize("value", ["Investment", "", 3, None])
    def test_parse_unknown(self, value: object) -> None:
        with pytest.raises(InvalidAccountError, match="Unknown account type"):
            AccountType.parse(value)

    def test_transaction_type_values(self) -> None:
        assert [t.value for t in TransactionType] == ["created", "deposit", "withdrawal"]


class TestSnapshots:
    """Tests for Account and Transaction snapshots."""

    def _transaction(self) -> Transaction:
        return Transaction(
            transaction_id="TXN00000001",
            account_number="ACC001",
            transaction_type=TransactionType.CREATED,
            amount=Decimal("100.00"),
            description="Account created with initial balance: $100.00",
            balance_after=Decimal("100.00"),
            timestamp=datetime(2024, 1, 1),
        )

    def test_transaction_is_frozen(self) -> None:
        tx = self._transaction()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.amount = Decimal("1.00")  # type: ignore[misc]

    def test_account_is_frozen(self) -> None:
        account = Account(
            account_number="ACC001",
            account_holder="John Smith",
            account_type=AccountType.SAVINGS,
            balance=Decimal("100.00"),
            created_date=datetime(2024, 1, 1),
            transaction_history=(self._transaction(),),
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.balance = Decimal("0")  # type: ignore[misc]
        assert account.transaction_count == 1
        assert account.last_transaction == self._transaction()

    def test_account_without_history(self) -> None:
        account = Account(
            account_number="ACC001",
            account_holder="John Smith",
            account_type=AccountType.SAVINGS,
            balance=Decimal("0.00"),
            created_date=datetime(2024, 1, 1),
        )
        assert account.last_transaction is None
        assert account.transaction_count == 0


class TestBankStats:
    """Tests for BankStats."""

    def test_defaults(self) -> None:
        stats = BankStats(total_accounts=0, total_balance=Decimal("0.00"))

        assert stats.accounts_by_type == {t: 0 for t in AccountType}
        assert stats.average_balance == Decimal("0.00")

    def test_type_properties(self) -> None:
        stats = BankStats(
            total_accounts=6,
            total_balance=Decimal("100.00"),
            accounts_by_type={
                AccountType.SAVINGS: 3,
                AccountType.CHECKING: 2,
                AccountType.BUSINESS: 1,
            },
        )

        assert stats.savings_accounts == 3
        assert stats.checking_accounts == 2
        assert stats.business_accounts == 1
        assert stats.average_balance == Decimal("16.67")

    def test_from_accounts(self) -> None:
        def account(number: str, balance: str, account_type: AccountType) -> Account:
            return Account(
                account_number=number,
                account_holder="Holder",
                account_type=account_type,
                balance=Decimal(balance),
                created_date=datetime(2024, 1, 1),
            )

        stats = BankStats.from_accounts(
            [
                account("ACC001", "10.50", AccountType.SAVINGS),
                account("ACC002", "4.50", AccountType.BUSINESS),
                account("ACC003", "0.00", AccountType.SAVINGS),
            ]
        )

        assert stats.total_accounts == 3
        assert stats.total_balance == Decimal("15.00")
        assert stats.accounts_by_type == {
            AccountType.SAVINGS: 2,
            AccountType.CHECKING: 0,
            AccountType.BUSINESS: 1,
        }

    def test_from_accounts_empty(self) -> None:
        stats = BankStats.from_accounts([])
        assert stats == BankStats(total_accounts=0, total_balance=Decimal("0.00"))
