"""Port for reading and appending sales and expense records."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.cash_register import LedgerEntry, LedgerKind


class LedgerRepositoryPort(Protocol):
    """Port exposing the sales and expense ledgers."""

    def sum_for_date(
        self,
        kind: LedgerKind,
        business_date: date,
    ) -> Decimal | None:
        """Return the total recorded on the calendar day.

        Args:
            kind: Ledger to aggregate.
            business_date: Day whose day, month and year must match.

        Returns:
            Decimal | None: Sum of totals, or None when no record matches.
        """

    def add_entry(self, entry: LedgerEntry) -> LedgerEntry:
        """Append a record to the ledger of ``entry.kind``."""


__all__ = ["LedgerRepositoryPort"]
