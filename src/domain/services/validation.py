"""Domain validation helpers."""

from decimal import Decimal

from src.domain.constants import CENT
from src.domain.errors import InvalidAmountError


def validate_non_negative(amount: Decimal | None, label: str) -> None:
    """Reject negative or sub-cent monetary inputs.

    Args:
        amount: Amount to check. ``None`` is accepted.
        label: Field name used in the error message.

    Raises:
        InvalidAmountError: If the amount is below zero or has more than
            two decimal places.
    """
    if amount is None:
        return
    if amount < 0:
        raise InvalidAmountError(f"{label} cannot be negative: {amount}")
    if amount != amount.quantize(CENT):
        raise InvalidAmountError(
            f"{label} has more than two decimal places: {amount}"
        )


__all__ = ["validate_non_negative"]
