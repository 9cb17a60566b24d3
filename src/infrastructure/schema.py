"""SQLAlchemy table definitions for registers and ledgers."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    Table,
)
from sqlalchemy.engine import Engine

from src.domain.models.cash_register import LedgerKind

metadata = MetaData()

cash_registers = Table(
    "cash_registers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("business_date", Date, nullable=False, unique=True),
    Column("opening_balance", Numeric(12, 2), nullable=True),
    Column("closing_balance", Numeric(12, 2), nullable=True),
    Column("is_open", Boolean, nullable=False, default=True),
)

sales = Table(
    "sales",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("recorded_at", DateTime, nullable=True, index=True),
    Column("total", Numeric(12, 2), nullable=False),
)

expenses = Table(
    "expenses",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("recorded_at", DateTime, nullable=True, index=True),
    Column("total", Numeric(12, 2), nullable=False),
)

LEDGER_TABLES = {
    LedgerKind.SALES: sales,
    LedgerKind.EXPENSES: expenses,
}


def create_schema(engine: Engine) -> None:
    """Create missing tables on the given engine."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "cash_registers",
    "sales",
    "expenses",
    "LEDGER_TABLES",
    "create_schema",
]
