"""Use case to append a sale or an expense to the ledgers."""

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.cash_register import LedgerEntry, LedgerKind
from src.domain.services.validation import validate_non_negative
from src.infrastructure.logging.logger import get_app_logger


class RecordLedgerEntryUseCase:
    """Record a sale or an expense."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._now = now

    def execute(
        self,
        kind: LedgerKind,
        total: Decimal,
        recorded_at: datetime | None = None,
    ) -> LedgerEntry:
        """Store the record and return it with its identifier.

        Raises:
            InvalidAmountError: If the total is negative.
        """
        validate_non_negative(total, "Total")
        entry = self._ledger_repository.add_entry(
            LedgerEntry(
                kind=LedgerKind(kind),
                recorded_at=recorded_at or self._now(),
                total=total,
            )
        )
        self._logger.info(
            f"Recorded {entry.kind.value} entry {entry.id}: {entry.total}"
        )
        return entry


__all__ = ["RecordLedgerEntryUseCase"]
