"""Errors raised by cash register operations."""

from datetime import date
from decimal import Decimal

from src.domain.constants import INSUFFICIENT_FUNDS_MESSAGE


class CashRegisterError(Exception):
    """Base class for cash register rule violations."""


class RegisterNotFoundError(CashRegisterError):
    """Raised when no register matches the requested identifier."""

    def __init__(self, register_id: int | None = None) -> None:
        self.register_id = register_id
        if register_id is None:
            message = "No cash register has been opened yet"
        else:
            message = f"Cash register {register_id} not found"
        super().__init__(message)


class InsufficientFundsError(CashRegisterError):
    """Raised when a withdrawal exceeds the cash available in a register."""

    def __init__(self, available: Decimal, requested: Decimal) -> None:
        self.available = available
        self.requested = requested
        super().__init__(INSUFFICIENT_FUNDS_MESSAGE)


class RegisterAlreadyClosedError(CashRegisterError):
    """Raised when closing a register that is no longer open."""

    def __init__(self, register_id: int) -> None:
        self.register_id = register_id
        super().__init__(f"Cash register {register_id} is already closed")


class RegisterAlreadyExistsError(CashRegisterError):
    """Raised when a register was already opened for the business date."""

    def __init__(self, business_date: date) -> None:
        self.business_date = business_date
        super().__init__(
            f"A cash register already exists for {business_date}"
        )


class InvalidAmountError(CashRegisterError):
    """Raised for negative monetary inputs."""


__all__ = [
    "CashRegisterError",
    "RegisterNotFoundError",
    "InsufficientFundsError",
    "RegisterAlreadyClosedError",
    "RegisterAlreadyExistsError",
    "InvalidAmountError",
]
