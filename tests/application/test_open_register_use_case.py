"""Tests for the OpenRegisterUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.open_register import OpenRegisterUseCase
from src.domain.errors import InvalidAmountError, RegisterAlreadyExistsError
from src.domain.models.cash_register import CashRegister, NewCashRegister


TODAY = date(2024, 5, 11)


def _repository(previous: CashRegister | None) -> MagicMock:
    repository = MagicMock()
    repository.exists_for_date.return_value = False
    repository.fetch_latest.return_value = previous

    def _insert(new_register: NewCashRegister) -> CashRegister:
        return CashRegister(
            id=(previous.id + 1) if previous else 1,
            business_date=new_register.business_date,
            opening_balance=new_register.opening_balance,
            closing_balance=new_register.closing_balance,
            is_open=new_register.is_open,
        )

    repository.insert.side_effect = _insert
    return repository


def _use_case(repository: MagicMock) -> OpenRegisterUseCase:
    return OpenRegisterUseCase(
        register_repository=repository,
        logger=MagicMock(),
        today=lambda: TODAY,
    )


def test_first_register_opens_with_requested_amount() -> None:
    """Without a previous register the entered amount is used."""
    repository = _repository(previous=None)

    register = _use_case(repository).execute(Decimal("100"))

    assert register.id == 1
    assert register.business_date == TODAY
    assert register.opening_balance == Decimal("100")
    assert register.closing_balance == Decimal("0")
    assert register.is_open is True
    repository.insert.assert_called_once_with(
        NewCashRegister(business_date=TODAY, opening_balance=Decimal("100"))
    )


def test_first_register_without_amount_keeps_it_missing() -> None:
    """A missing amount is not coerced to zero for the first register."""
    repository = _repository(previous=None)

    register = _use_case(repository).execute(None)

    assert register.opening_balance is None


def test_carries_previous_closing_balance() -> None:
    """The previous closing balance is added to the entered amount."""
    previous = CashRegister(
        id=1,
        business_date=date(2024, 5, 10),
        opening_balance=Decimal("100"),
        closing_balance=Decimal("100"),
        is_open=False,
    )
    repository = _repository(previous=previous)

    register = _use_case(repository).execute(Decimal("10"))

    assert register.id == 2
    assert register.opening_balance == Decimal("110")


def test_rejects_second_open_on_same_date() -> None:
    """Only one register may be opened per business date."""
    repository = _repository(previous=None)
    repository.exists_for_date.return_value = True

    with pytest.raises(RegisterAlreadyExistsError):
        _use_case(repository).execute(Decimal("10"))

    repository.exists_for_date.assert_called_once_with(TODAY)
    repository.insert.assert_not_called()


def test_rejects_negative_amount() -> None:
    """Negative opening amounts are rejected before touching the store."""
    repository = _repository(previous=None)

    with pytest.raises(InvalidAmountError):
        _use_case(repository).execute(Decimal("-5"))

    repository.insert.assert_not_called()
