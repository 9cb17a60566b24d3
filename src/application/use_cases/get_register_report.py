"""Use case to report a cash register with its derived totals."""

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_aggregator import LedgerAggregator
from src.domain.errors import RegisterNotFoundError
from src.domain.models.cash_register import RegisterReport
from src.domain.services.cash_register import build_register_report
from src.infrastructure.logging.logger import get_app_logger


class GetRegisterReportUseCase:
    """Report the current register, or a specific one by identifier."""

    def __init__(
        self,
        register_repository: CashRegisterRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            register_repository: Port providing access to stored registers.
            ledger_repository: Port providing the sales and expense ledgers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._register_repository = register_repository
        self._aggregator = LedgerAggregator(ledger_repository)
        self._logger = logger or get_app_logger()

    def execute(self, register_id: int | None = None) -> RegisterReport:
        """Return the register report computed from the current ledgers.

        Args:
            register_id: Register to report. Defaults to the latest one.

        Returns:
            RegisterReport: Stored fields merged with derived figures.

        Raises:
            RegisterNotFoundError: If no register matches.
        """
        if register_id is None:
            register = self._register_repository.fetch_latest()
        else:
            register = self._register_repository.fetch_by_id(register_id)
        if register is None:
            raise RegisterNotFoundError(register_id)

        totals = self._aggregator.totals_for(register.business_date)
        report = build_register_report(register, totals)
        self._logger.info(
            f"Register {report.id} on {report.business_date}: "
            f"cash_on_hand={report.cash_on_hand}, "
            f"net_profit={report.net_profit}"
        )
        return report


__all__ = ["GetRegisterReportUseCase", "RegisterReport"]
