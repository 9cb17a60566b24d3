"""Use case returning the closing balance of the latest register."""

from decimal import Decimal

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.domain.constants import ZERO


class GetLastClosingBalanceUseCase:
    """Return the balance the next register will carry over."""

    def __init__(self, register_repository: CashRegisterRepositoryPort) -> None:
        self._register_repository = register_repository

    def execute(self) -> Decimal | None:
        """Return the latest closing balance, or 0 when no register exists."""
        latest = self._register_repository.fetch_latest()
        if latest is None:
            return ZERO
        return latest.closing_balance


__all__ = ["GetLastClosingBalanceUseCase"]
