"""Port for storing cash registers."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.cash_register import CashRegister, NewCashRegister


class CashRegisterRepositoryPort(Protocol):
    """Port exposing read and write access to cash registers.

    "Latest" always means the register with the highest identifier.
    """

    def fetch_latest(self) -> CashRegister | None:
        """Return the most recent register, or None when the store is empty."""

    def fetch_by_id(self, register_id: int) -> CashRegister | None:
        """Return the register with the given identifier."""

    def fetch_all(self) -> list[CashRegister]:
        """Return every register, most recent first."""

    def exists_for_date(self, business_date: date) -> bool:
        """Return True when a register was already opened on the date."""

    def insert(self, register: NewCashRegister) -> CashRegister:
        """Persist a new register and return it with its identifier.

        Raises:
            RegisterAlreadyExistsError: If the date already has a register.
        """

    def close_if_open(
        self,
        register_id: int,
        closing_balance: Decimal,
    ) -> CashRegister | None:
        """Close the register only if it is still open.

        Returns:
            CashRegister | None: The closed register, or None when the
            register was closed concurrently.
        """


__all__ = ["CashRegisterRepositoryPort"]
