"""SQLAlchemy-backed repository for the sales and expense ledgers."""

from datetime import date
from decimal import Decimal

from sqlalchemy import extract, func, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.cash_register import LedgerEntry, LedgerKind
from src.infrastructure.schema import LEDGER_TABLES


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for sales and expenses."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the restaurant engine.
        """
        self._db_port = db_port

    def sum_for_date(
        self,
        kind: LedgerKind,
        business_date: date,
    ) -> Decimal | None:
        """Return the ledger total for records on the calendar day.

        Day, month and year are compared independently, so the time part
        of ``recorded_at`` never matters.
        """
        table = LEDGER_TABLES[LedgerKind(kind)]
        recorded_at = table.c.recorded_at
        query = select(func.sum(table.c.total)).where(
            extract("year", recorded_at) == business_date.year,
            extract("month", recorded_at) == business_date.month,
            extract("day", recorded_at) == business_date.day,
        )
        with self._db_port.get_engine().connect() as conn:
            return conn.execute(query).scalar()

    def add_entry(self, entry: LedgerEntry) -> LedgerEntry:
        """Insert the record into the ledger table of its kind."""
        table = LEDGER_TABLES[LedgerKind(entry.kind)]
        statement = insert(table).values(
            recorded_at=entry.recorded_at,
            total=entry.total,
        )
        with self._db_port.get_engine().begin() as conn:
            result = conn.execute(statement)
            entry_id = result.inserted_primary_key[0]
        return LedgerEntry(
            kind=entry.kind,
            recorded_at=entry.recorded_at,
            total=entry.total,
            id=entry_id,
        )


__all__ = ["SqlAlchemyLedgerRepository"]
