"""Sample data generators."""

from bank_ledger.generators.account import (
    SAMPLE_ACCOUNTS,
    AccountGenerator,
    AccountSeed,
    load_sample_data,
)

__all__ = ["SAMPLE_ACCOUNTS", "AccountGenerator", "AccountSeed", "load_sample_data"]
