"""Tests for the GetRegisterReportUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_register_report import (
    GetRegisterReportUseCase,
)
from src.domain.errors import RegisterNotFoundError
from src.domain.models.cash_register import CashRegister


def _register(register_id: int = 3) -> CashRegister:
    return CashRegister(
        id=register_id,
        business_date=date(2024, 5, 10),
        opening_balance=Decimal("100"),
        closing_balance=Decimal("0"),
        is_open=True,
    )


def test_execute_reports_latest_register() -> None:
    """Without an id the latest register is reported."""
    registers = MagicMock()
    registers.fetch_latest.return_value = _register()
    ledgers = MagicMock()
    ledgers.sum_for_date.side_effect = [Decimal("50"), Decimal("20")]

    use_case = GetRegisterReportUseCase(
        register_repository=registers,
        ledger_repository=ledgers,
        logger=MagicMock(),
    )
    report = use_case.execute()

    assert report.id == 3
    assert report.income == Decimal("50")
    assert report.expense == Decimal("20")
    assert report.cash_on_hand == Decimal("130")
    assert report.net_profit == Decimal("30")
    registers.fetch_by_id.assert_not_called()


def test_execute_reports_register_by_id() -> None:
    """A specific register can be reported by identifier."""
    registers = MagicMock()
    registers.fetch_by_id.return_value = _register(register_id=7)
    ledgers = MagicMock()
    ledgers.sum_for_date.return_value = None

    use_case = GetRegisterReportUseCase(
        register_repository=registers,
        ledger_repository=ledgers,
        logger=MagicMock(),
    )
    report = use_case.execute(7)

    assert report.id == 7
    assert report.cash_on_hand == Decimal("100")
    registers.fetch_by_id.assert_called_once_with(7)
    registers.fetch_latest.assert_not_called()


def test_execute_raises_on_empty_store() -> None:
    """Reporting before any register exists raises not-found."""
    registers = MagicMock()
    registers.fetch_latest.return_value = None

    use_case = GetRegisterReportUseCase(
        register_repository=registers,
        ledger_repository=MagicMock(),
        logger=MagicMock(),
    )

    with pytest.raises(RegisterNotFoundError):
        use_case.execute()


def test_execute_raises_for_unknown_id() -> None:
    """Unknown identifiers raise not-found with the id attached."""
    registers = MagicMock()
    registers.fetch_by_id.return_value = None

    use_case = GetRegisterReportUseCase(
        register_repository=registers,
        ledger_repository=MagicMock(),
        logger=MagicMock(),
    )

    with pytest.raises(RegisterNotFoundError) as excinfo:
        use_case.execute(42)

    assert excinfo.value.register_id == 42
