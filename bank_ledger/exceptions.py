"""Custom exception hierarchy for bank-ledger."""


class BankLedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class AccountNotFoundError(BankLedgerError):
    """Raised when an account number is not in the ledger."""


class DuplicateAccountError(BankLedgerError):
    """Raised when opening an account whose number is already taken."""


class InvalidAccountError(BankLedgerError):
    """Raised when account fields are missing or malformed."""


class InvalidAmountError(BankLedgerError):
    """Raised when a monetary amount is not acceptable for the operation."""


class InsufficientFundsError(InvalidAmountError):
    """Raised when a withdrawal exceeds the current balance."""


class ConfigurationError(BankLedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(BankLedgerError):
    """Raised when an export sink cannot write its output."""
