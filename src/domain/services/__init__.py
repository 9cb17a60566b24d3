"""Domain services package."""

from .cash_register import (
    build_register_report,
    carry_forward_opening_balance,
    compute_available_cash,
    compute_closing_balance,
    compute_net_profit,
)
from .validation import validate_non_negative

__all__ = [
    "build_register_report",
    "carry_forward_opening_balance",
    "compute_available_cash",
    "compute_closing_balance",
    "compute_net_profit",
    "validate_non_negative",
]
