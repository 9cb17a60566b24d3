"""Use case to close a cash register after a withdrawal."""

from decimal import Decimal

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_aggregator import LedgerAggregator
from src.domain.errors import (
    InsufficientFundsError,
    RegisterAlreadyClosedError,
    RegisterNotFoundError,
)
from src.domain.models.cash_register import CashRegister
from src.domain.services.cash_register import compute_closing_balance
from src.domain.services.validation import validate_non_negative
from src.infrastructure.logging.logger import get_app_logger


class CloseRegisterUseCase:
    """Close an open register, keeping what is left after the withdrawal.

    The withdrawal may equal the available cash; only a larger amount is
    rejected. The write is conditional on the register still being open,
    so a concurrent close cannot decrement it twice.
    """

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

    def execute(self, register_id: int, withdrawal: Decimal) -> CashRegister:
        """Close the register.

        Args:
            register_id: Register to close.
            withdrawal: Cash taken out of the till ("cantidad a sacar").

        Returns:
            CashRegister: The closed register.

        Raises:
            RegisterNotFoundError: If the register does not exist.
            RegisterAlreadyClosedError: If the register is already closed.
            InsufficientFundsError: If the withdrawal exceeds available cash.
            InvalidAmountError: If the withdrawal is negative.
        """
        validate_non_negative(withdrawal, "Withdrawal")
        register = self._register_repository.fetch_by_id(register_id)
        if register is None:
            raise RegisterNotFoundError(register_id)

        totals = self._aggregator.totals_for(register.business_date)
        try:
            closing_balance = compute_closing_balance(
                register,
                totals,
                withdrawal,
            )
        except InsufficientFundsError as exc:
            self._logger.warning(
                f"Rejected close of register {register_id}: "
                f"available={exc.available}, requested={exc.requested}"
            )
            raise

        closed = self._register_repository.close_if_open(
            register_id,
            closing_balance,
        )
        if closed is None:
            self._logger.warning(
                f"Register {register_id} was closed by another request"
            )
            raise RegisterAlreadyClosedError(register_id)

        self._logger.info(
            f"Closed register {register_id}: withdrawal={withdrawal}, "
            f"closing_balance={closing_balance}"
        )
        return closed


__all__ = ["CloseRegisterUseCase"]
