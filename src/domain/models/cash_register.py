"""Domain models for the daily cash register."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class LedgerKind(str, Enum):
    """Record streams aggregated against a register date."""

    SALES = "sales"
    EXPENSES = "expenses"


@dataclass(frozen=True)
class CashRegister:
    """Stored cash register for one business day.

    Attributes:
        id: Identifier assigned by the store, strictly increasing.
        business_date: Calendar day the register covers.
        opening_balance: Cash present when the register was opened.
        closing_balance: Cash left after the close withdrawal, 0 while open.
        is_open: True from creation until the register is closed.
    """

    id: int
    business_date: date
    opening_balance: Decimal | None
    closing_balance: Decimal | None
    is_open: bool


@dataclass(frozen=True)
class NewCashRegister:
    """Register values to insert before an identifier is assigned."""

    business_date: date
    opening_balance: Decimal | None
    closing_balance: Decimal = Decimal("0")
    is_open: bool = True


@dataclass(frozen=True)
class LedgerEntry:
    """A sale or expense recorded on the restaurant ledgers."""

    kind: LedgerKind
    recorded_at: datetime
    total: Decimal
    id: int | None = None


@dataclass(frozen=True)
class LedgerTotals:
    """Sales and expense sums for one calendar day.

    ``None`` means the ledger holds no records for the day.
    """

    sales: Decimal | None
    expenses: Decimal | None


@dataclass(frozen=True)
class RegisterReport:
    """Register fields merged with figures derived from the ledgers."""

    id: int
    business_date: date
    is_open: bool
    opening_balance: Decimal | None
    income: Decimal | None
    expense: Decimal | None
    cash_on_hand: Decimal
    handed_over: Decimal | None
    gross_revenue: Decimal | None
    net_profit: Decimal

    def as_dict(self) -> dict[str, Any]:
        """Return the report using the external field names."""
        return {
            "id": self.id,
            "date": self.business_date,
            "isOpen": self.is_open,
            "openingBalance": self.opening_balance,
            "income": self.income,
            "expense": self.expense,
            "cashOnHand": self.cash_on_hand,
            "handedOver": self.handed_over,
            "grossRevenue": self.gross_revenue,
            "netProfit": self.net_profit,
        }


__all__ = [
    "LedgerKind",
    "CashRegister",
    "NewCashRegister",
    "LedgerEntry",
    "LedgerTotals",
    "RegisterReport",
]
