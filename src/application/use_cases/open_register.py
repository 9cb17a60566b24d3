"""Use case to open the cash register of the current business day."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.domain.errors import RegisterAlreadyExistsError
from src.domain.models.cash_register import CashRegister, NewCashRegister
from src.domain.services.cash_register import carry_forward_opening_balance
from src.domain.services.validation import validate_non_negative
from src.infrastructure.logging.logger import get_app_logger


class OpenRegisterUseCase:
    """Open a register carrying over the previous closing balance.

    Only one register may exist per business date. The previous register
    is the one with the highest identifier.
    """

    def __init__(
        self,
        register_repository: CashRegisterRepositoryPort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            register_repository: Port providing access to stored registers.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock returning the current business date.
        """
        self._register_repository = register_repository
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(self, opening_amount: Decimal | None = None) -> CashRegister:
        """Create and store today's register.

        Args:
            opening_amount: Cash added to the till on opening.

        Returns:
            CashRegister: The stored register.

        Raises:
            InvalidAmountError: If the opening amount is negative.
            RegisterAlreadyExistsError: If today already has a register.
        """
        validate_non_negative(opening_amount, "Opening amount")
        business_date = self._today()
        if self._register_repository.exists_for_date(business_date):
            self._logger.warning(
                f"Rejected open: register already exists for {business_date}"
            )
            raise RegisterAlreadyExistsError(business_date)

        previous = self._register_repository.fetch_latest()
        opening_balance = carry_forward_opening_balance(
            previous,
            opening_amount,
        )
        register = self._register_repository.insert(
            NewCashRegister(
                business_date=business_date,
                opening_balance=opening_balance,
            )
        )
        carried = previous.closing_balance if previous else None
        self._logger.info(
            f"Opened register {register.id} for {business_date}: "
            f"opening_balance={opening_balance} (carried={carried}, "
            f"entered={opening_amount})"
        )
        return register


__all__ = ["OpenRegisterUseCase"]
