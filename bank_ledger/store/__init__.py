"""In-memory account registry."""

from bank_ledger.store.ledger import Ledger

__all__ = ["Ledger"]
