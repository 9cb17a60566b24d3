"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize a possibly missing amount to Decimal.

    Missing amounts (an empty ledger sum, an unset opening balance) count as
    zero in register arithmetic.

    Args:
        value: Raw numeric value from SQL, adapters or domain models.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


__all__ = ["coerce_decimal"]
