"""Ledger construction from configuration."""

from bank_ledger.config import LedgerConfig
from bank_ledger.generators import AccountGenerator, load_sample_data
from bank_ledger.logging import get_logger
from bank_ledger.store import Ledger

logger = get_logger(__name__)


def build_ledger(config: LedgerConfig | None = None) -> Ledger:
    """Create a ledger and seed it as the config asks.

    Parameters
    ----------
    config : LedgerConfig | None
        Configuration; defaults to ``LedgerConfig()``.

    Returns
    -------
    Ledger
        A new ledger owned by the caller.
    """
    config = (config or LedgerConfig()).validate()
    ledger = Ledger()

    if config.load_sample_data:
        load_sample_data(ledger)

    if config.random_accounts:
        generator = AccountGenerator(seed=config.seed, locale=config.locale)
        generator.populate(ledger, config.random_accounts)

    logger.info("Ledger ready: %s", ledger.summary())
    return ledger
