"""Pure computations behind the cash register lifecycle."""

from decimal import Decimal

from src.domain.errors import (
    InsufficientFundsError,
    RegisterAlreadyClosedError,
)
from src.domain.models.cash_register import (
    CashRegister,
    LedgerTotals,
    RegisterReport,
)
from src.utils.decimal_utils import coerce_decimal


def compute_net_profit(totals: LedgerTotals) -> Decimal:
    """Return the day's sales minus its expenses.

    Args:
        totals: Ledger sums for the register date.

    Returns:
        Decimal: Net profit, missing sums counting as zero.
    """
    return coerce_decimal(totals.sales) - coerce_decimal(totals.expenses)


def compute_available_cash(
    opening_balance: Decimal | None,
    totals: LedgerTotals,
) -> Decimal:
    """Return the cash expected in the till.

    Args:
        opening_balance: Register opening balance, possibly missing.
        totals: Ledger sums for the register date.

    Returns:
        Decimal: Opening balance plus sales minus expenses.
    """
    return coerce_decimal(opening_balance) + compute_net_profit(totals)


def carry_forward_opening_balance(
    previous: CashRegister | None,
    requested: Decimal | None,
) -> Decimal | None:
    """Compute the opening balance of a new register.

    Without a previous register the requested amount is used as is, so a
    missing amount stays missing. Otherwise the previous closing balance is
    carried over and the requested amount is added on top of it.

    Args:
        previous: Most recent register, if any.
        requested: Opening amount entered by the cashier.

    Returns:
        Decimal | None: Opening balance to store.
    """
    if previous is None or previous.closing_balance is None:
        return requested
    return previous.closing_balance + coerce_decimal(requested)


def compute_closing_balance(
    register: CashRegister,
    totals: LedgerTotals,
    withdrawal: Decimal,
) -> Decimal:
    """Validate a close request and return the resulting closing balance.

    Args:
        register: Register being closed.
        totals: Ledger sums for the register date.
        withdrawal: Cash taken out of the till.

    Returns:
        Decimal: Available cash minus the withdrawal.

    Raises:
        RegisterAlreadyClosedError: If the register is already closed.
        InsufficientFundsError: If the withdrawal exceeds available cash.
    """
    if not register.is_open:
        raise RegisterAlreadyClosedError(register.id)
    available = compute_available_cash(register.opening_balance, totals)
    if available < withdrawal:
        raise InsufficientFundsError(available, withdrawal)
    return available - withdrawal


def build_register_report(
    register: CashRegister,
    totals: LedgerTotals,
) -> RegisterReport:
    """Merge stored register fields with the derived ledger figures."""
    return RegisterReport(
        id=register.id,
        business_date=register.business_date,
        is_open=register.is_open,
        opening_balance=register.opening_balance,
        income=totals.sales,
        expense=totals.expenses,
        cash_on_hand=compute_available_cash(register.opening_balance, totals),
        handed_over=register.closing_balance,
        gross_revenue=totals.sales,
        net_profit=compute_net_profit(totals),
    )


__all__ = [
    "compute_net_profit",
    "compute_available_cash",
    "carry_forward_opening_balance",
    "compute_closing_balance",
    "build_register_report",
]
