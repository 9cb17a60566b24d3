"""Tests for the LedgerAggregator."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, call

from src.application.use_cases.ledger_aggregator import LedgerAggregator
from src.domain.models.cash_register import LedgerKind


def test_totals_for_queries_both_ledgers() -> None:
    """Both ledgers should be summed for the same calendar day."""
    repository = MagicMock()
    repository.sum_for_date.side_effect = [Decimal("50"), None]
    aggregator = LedgerAggregator(repository)

    totals = aggregator.totals_for(date(2024, 5, 10))

    assert totals.sales == Decimal("50")
    assert totals.expenses is None
    assert repository.sum_for_date.call_args_list == [
        call(LedgerKind.SALES, date(2024, 5, 10)),
        call(LedgerKind.EXPENSES, date(2024, 5, 10)),
    ]


def test_total_for_accepts_kind_values() -> None:
    """Raw kind values are normalized to the LedgerKind enumeration."""
    repository = MagicMock()
    repository.sum_for_date.return_value = Decimal("12.50")
    aggregator = LedgerAggregator(repository)

    total = aggregator.total_for("expenses", date(2024, 5, 10))

    assert total == Decimal("12.50")
    repository.sum_for_date.assert_called_once_with(
        LedgerKind.EXPENSES,
        date(2024, 5, 10),
    )
