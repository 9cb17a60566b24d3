"""Use case to list every cash register with its derived totals."""

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_aggregator import LedgerAggregator
from src.domain.models.cash_register import RegisterReport
from src.domain.services.cash_register import build_register_report
from src.infrastructure.logging.logger import get_app_logger


class ListRegistersUseCase:
    """Return all registers, most recent first."""

    def __init__(
        self,
        register_repository: CashRegisterRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._register_repository = register_repository
        self._aggregator = LedgerAggregator(ledger_repository)
        self._logger = logger or get_app_logger()

    def execute(self) -> list[RegisterReport]:
        """Return one report per stored register."""
        registers = self._register_repository.fetch_all()
        self._logger.info(f"Fetched {len(registers)} cash registers")
        return [
            build_register_report(
                register,
                self._aggregator.totals_for(register.business_date),
            )
            for register in registers
        ]


__all__ = ["ListRegistersUseCase"]
