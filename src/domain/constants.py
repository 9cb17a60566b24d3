"""Domain constants for the cash register."""

from decimal import Decimal

ZERO = Decimal("0")

# Smallest amount the register stores.
CENT = Decimal("0.01")

INSUFFICIENT_FUNDS_MESSAGE = "Insufficient cash in register"


__all__ = ["ZERO", "CENT", "INSUFFICIENT_FUNDS_MESSAGE"]
