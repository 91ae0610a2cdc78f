"""Account generators: the fixed demo set and Faker-driven random accounts."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models import Account, AccountType
from bank_ledger.store import Ledger

logger = get_logger(__name__)

SAMPLE_ACCOUNTS = [
    ("ACC001", "John Smith", Decimal("5000.00"), AccountType.SAVINGS),
    ("ACC002", "Jane Doe", Decimal("3500.00"), AccountType.CHECKING),
    ("ACC003", "Bob Johnson", Decimal("10000.00"), AccountType.BUSINESS),
    ("ACC004", "Alice Williams", Decimal("2500.00"), AccountType.SAVINGS),
]

# (account_number, "deposit" | "withdraw", amount)
SAMPLE_ACTIVITY = [
    ("ACC001", "deposit", Decimal("500.00")),
    ("ACC001", "withdraw", Decimal("200.00")),
    ("ACC002", "deposit", Decimal("1000.00")),
    ("ACC003", "withdraw", Decimal("500.00")),
]


def load_sample_data(ledger: Ledger) -> list[Account]:
    """Seed a ledger with the demo accounts and a few postings.

    Accounts whose number is already taken are skipped.

    Returns
    -------
    list[Account]
        Snapshots of the sample accounts after all postings.
    """
    for number, holder, balance, account_type in SAMPLE_ACCOUNTS:
        ledger.create_account(number, holder, balance, account_type)

    for number, action, amount in SAMPLE_ACTIVITY:
        if action == "deposit":
            ledger.deposit(number, amount)
        else:
            ledger.withdraw(number, amount)

    accounts = [ledger.get_account(number) for number, *_ in SAMPLE_ACCOUNTS]
    logger.info("Loaded %d sample accounts", len(accounts))
    return [account for account in accounts if account is not None]


@dataclass(frozen=True)
class AccountSeed:
    """Arguments for opening one generated account."""

    account_number: str
    account_holder: str
    initial_balance: Decimal
    account_type: AccountType


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts.

    Account type mix roughly follows a retail branch: mostly savings
    and checking, some business accounts.
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.45, 0.40, 0.15]

    def generate(self, account_number: str) -> AccountSeed:
        """Generate a single account seed.

        Parameters
        ----------
        account_number : str
            Number to assign to the account.

        Returns
        -------
        AccountSeed
            Generated account fields.
        """
        account_type = self.random.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]

        if account_type == AccountType.BUSINESS:
            holder = self.fake.company()
            balance = self.random.uniform(2000, 50000)
        else:
            holder = self.fake.name()
            balance = self.random.uniform(0, 15000)

        return AccountSeed(
            account_number=account_number,
            account_holder=holder,
            initial_balance=Decimal(str(round(balance, 2))).quantize(Decimal("0.01")),
            account_type=account_type,
        )

    def generate_batch(self, count: int, start: int = 1, prefix: str = "ACC") -> Iterator[AccountSeed]:
        """Generate ``count`` seeds numbered ``{prefix}{start:03d}`` upwards."""
        for i in range(start, start + count):
            yield self.generate(f"{prefix}{i:03d}")

    def populate(self, ledger: Ledger, count: int, max_activity: int = 5) -> list[Account]:
        """Open ``count`` new accounts in a ledger and post random activity.

        Numbers continue after the highest ``ACC`` number already present.
        Withdrawals are capped at the current balance, so every posting
        is accepted.

        Returns
        -------
        list[Account]
            Snapshots of the opened accounts after their activity.
        """
        start = self._next_number(ledger)
        opened = []

        for seed in self.generate_batch(count, start=start):
            ledger.open_account(
                seed.account_number,
                seed.account_holder,
                seed.initial_balance,
                seed.account_type,
            )
            for _ in range(self.random.randint(0, max_activity)):
                self._post_activity(ledger, seed.account_number)
            opened.append(ledger.require_account(seed.account_number))

        logger.info("Generated %d random accounts", len(opened))
        return opened

    def _post_activity(self, ledger: Ledger, account_number: str) -> None:
        balance = ledger.require_account(account_number).balance
        if balance > 0 and self.random.random() < 0.4:
            amount = Decimal(str(round(self.random.uniform(0.01, float(balance)), 2)))
            if 0 < amount <= balance:
                ledger.post_withdrawal(account_number, amount)
                return
        amount = Decimal(str(round(self.random.uniform(10, 2500), 2)))
        ledger.post_deposit(account_number, amount)

    @staticmethod
    def _next_number(ledger: Ledger) -> int:
        highest = 0
        for account in ledger.get_all_accounts():
            suffix = account.account_number[3:]
            if account.account_number.startswith("ACC") and suffix.isdigit():
                highest = max(highest, int(suffix))
        return highest + 1
