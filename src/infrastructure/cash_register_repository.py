"""SQLAlchemy-backed repository for cash registers."""

from datetime import date
from decimal import Decimal

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.errors import RegisterAlreadyExistsError
from src.domain.models.cash_register import CashRegister, NewCashRegister
from src.infrastructure.schema import cash_registers


class SqlAlchemyCashRegisterRepository(CashRegisterRepositoryPort):
    """Repository backed by SQLAlchemy for cash registers."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the restaurant engine.
        """
        self._db_port = db_port

    def fetch_latest(self) -> CashRegister | None:
        """Return the register with the highest identifier."""
        query = (
            select(cash_registers)
            .order_by(cash_registers.c.id.desc())
            .limit(1)
        )
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return self._to_register(row) if row is not None else None

    def fetch_by_id(self, register_id: int) -> CashRegister | None:
        """Return the register with the given identifier."""
        query = select(cash_registers).where(
            cash_registers.c.id == register_id
        )
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return self._to_register(row) if row is not None else None

    def fetch_all(self) -> list[CashRegister]:
        """Return every register, most recent first."""
        query = select(cash_registers).order_by(cash_registers.c.id.desc())
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_register(row) for row in rows]

    def exists_for_date(self, business_date: date) -> bool:
        """Return True when the date already has a register."""
        query = select(cash_registers.c.id).where(
            cash_registers.c.business_date == business_date
        )
        with self._db_port.get_engine().connect() as conn:
            return conn.execute(query).first() is not None

    def insert(self, register: NewCashRegister) -> CashRegister:
        """Insert the register and return the row as stored.

        Raises:
            RegisterAlreadyExistsError: If the business date is taken.
        """
        statement = insert(cash_registers).values(
            business_date=register.business_date,
            opening_balance=register.opening_balance,
            closing_balance=register.closing_balance,
            is_open=register.is_open,
        )
        try:
            with self._db_port.get_engine().begin() as conn:
                result = conn.execute(statement)
                register_id = result.inserted_primary_key[0]
                row = conn.execute(
                    select(cash_registers).where(
                        cash_registers.c.id == register_id
                    )
                ).first()
        except IntegrityError as exc:
            raise RegisterAlreadyExistsError(register.business_date) from exc
        return self._to_register(row)

    def close_if_open(
        self,
        register_id: int,
        closing_balance: Decimal,
    ) -> CashRegister | None:
        """Close the register in a single conditional update.

        Returns:
            CashRegister | None: The closed register, or None when no open
            register matched.
        """
        statement = (
            update(cash_registers)
            .where(
                cash_registers.c.id == register_id,
                cash_registers.c.is_open.is_(True),
            )
            .values(closing_balance=closing_balance, is_open=False)
        )
        query = select(cash_registers).where(
            cash_registers.c.id == register_id
        )
        with self._db_port.get_engine().begin() as conn:
            result = conn.execute(statement)
            if result.rowcount != 1:
                return None
            row = conn.execute(query).first()
        return self._to_register(row)

    @staticmethod
    def _to_register(row) -> CashRegister:
        return CashRegister(
            id=row.id,
            business_date=row.business_date,
            opening_balance=row.opening_balance,
            closing_balance=row.closing_balance,
            is_open=bool(row.is_open),
        )


__all__ = ["SqlAlchemyCashRegisterRepository"]
