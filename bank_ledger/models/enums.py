"""Enumeration types for ledger entities."""

from enum import Enum

from bank_ledger.exceptions import InvalidAccountError


class AccountType(str, Enum):
    SAVINGS = "Savings"
    CHECKING = "Checking"
    BUSINESS = "Business"

    @classmethod
    def parse(cls, value: "AccountType | str") -> "AccountType":
        """Resolve a member from itself, its value or its name (any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            for member in cls:
                if text.lower() in (member.value.lower(), member.name.lower()):
                    return member
        raise InvalidAccountError(f"Unknown account type: {value!r}")


class TransactionType(str, Enum):
    CREATED = "created"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
