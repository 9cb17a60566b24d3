"""Daily sales and expense sums used by the register operations."""

from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.cash_register import LedgerKind, LedgerTotals


class LedgerAggregator:
    """Aggregate the sales and expense ledgers for a calendar day."""

    def __init__(self, ledger_repository: LedgerRepositoryPort) -> None:
        """Initialize the aggregator.

        Args:
            ledger_repository: Port providing read access to the ledgers.
        """
        self._ledger_repository = ledger_repository

    def total_for(
        self,
        kind: LedgerKind,
        business_date: date,
    ) -> Decimal | None:
        """Return the sum of one ledger for the day.

        Args:
            kind: Ledger to aggregate.
            business_date: Calendar day to match.

        Returns:
            Decimal | None: Total, or None when the day has no records.
        """
        return self._ledger_repository.sum_for_date(
            LedgerKind(kind),
            business_date,
        )

    def totals_for(self, business_date: date) -> LedgerTotals:
        """Return sales and expense sums for the day."""
        return LedgerTotals(
            sales=self.total_for(LedgerKind.SALES, business_date),
            expenses=self.total_for(LedgerKind.EXPENSES, business_date),
        )


__all__ = ["LedgerAggregator", "LedgerTotals"]
