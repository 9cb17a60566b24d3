"""Domain models package."""

from .cash_register import (
    CashRegister,
    LedgerEntry,
    LedgerKind,
    LedgerTotals,
    NewCashRegister,
    RegisterReport,
)

__all__ = [
    "CashRegister",
    "LedgerEntry",
    "LedgerKind",
    "LedgerTotals",
    "NewCashRegister",
    "RegisterReport",
]
