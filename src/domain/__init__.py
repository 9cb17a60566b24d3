"""Domain package for cash register rules and core models."""

from .constants import CENT, INSUFFICIENT_FUNDS_MESSAGE, ZERO
from .errors import (
    CashRegisterError,
    InsufficientFundsError,
    InvalidAmountError,
    RegisterAlreadyClosedError,
    RegisterAlreadyExistsError,
    RegisterNotFoundError,
)
from .models import (
    CashRegister,
    LedgerEntry,
    LedgerKind,
    LedgerTotals,
    NewCashRegister,
    RegisterReport,
)
from .services import (
    build_register_report,
    carry_forward_opening_balance,
    compute_available_cash,
    compute_closing_balance,
    compute_net_profit,
    validate_non_negative,
)

__all__ = [
    "CENT",
    "INSUFFICIENT_FUNDS_MESSAGE",
    "ZERO",
    "CashRegisterError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "RegisterAlreadyClosedError",
    "RegisterAlreadyExistsError",
    "RegisterNotFoundError",
    "CashRegister",
    "LedgerEntry",
    "LedgerKind",
    "LedgerTotals",
    "NewCashRegister",
    "RegisterReport",
    "build_register_report",
    "carry_forward_opening_balance",
    "compute_available_cash",
    "compute_closing_balance",
    "compute_net_profit",
    "validate_non_negative",
]
