"""Decimal helpers for monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bank_ledger.exceptions import InvalidAmountError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# 15 integer digits; balances stay well inside the 28-digit default context
MAX_AMOUNT = Decimal("999999999999999.99")


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Convert a value to a Decimal quantized to cents.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary expansion.

    Parameters
    ----------
    value : Decimal | int | float | str
        Amount to convert.

    Returns
    -------
    Decimal
        Amount rounded half-up to two decimal places.

    Raises
    ------
    InvalidAmountError
        If the value is a bool, cannot be parsed, is not finite, or its
        magnitude exceeds ``MAX_AMOUNT``.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidAmountError(f"Invalid amount: {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount exceeds {MAX_AMOUNT}: {value!r}")

    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
