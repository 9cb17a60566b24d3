"""Tests for the SQLAlchemy cash register repository."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import RegisterAlreadyExistsError
from src.domain.models.cash_register import NewCashRegister
from src.infrastructure.cash_register_repository import (
    SqlAlchemyCashRegisterRepository,
)


def test_empty_store_has_no_latest(db_port) -> None:
    repository = SqlAlchemyCashRegisterRepository(db_port)

    assert repository.fetch_latest() is None
    assert repository.fetch_all() == []
    assert repository.fetch_by_id(1) is None


def test_insert_assigns_increasing_ids(db_port) -> None:
    """Inserted registers come back with ids, most recent first."""
    repository = SqlAlchemyCashRegisterRepository(db_port)

    first = repository.insert(
        NewCashRegister(date(2024, 5, 10), Decimal("100"))
    )
    second = repository.insert(NewCashRegister(date(2024, 5, 11), None))

    assert second.id > first.id
    assert repository.fetch_latest() == second
    assert [register.id for register in repository.fetch_all()] == [
        second.id,
        first.id,
    ]
    stored = repository.fetch_by_id(first.id)
    assert stored.business_date == date(2024, 5, 10)
    assert stored.opening_balance == Decimal("100")
    assert stored.closing_balance == Decimal("0")
    assert stored.is_open is True
    assert repository.fetch_by_id(second.id).opening_balance is None


def test_latest_follows_identifier_not_date(db_port) -> None:
    """The most recent register is the one with the highest id."""
    repository = SqlAlchemyCashRegisterRepository(db_port)
    repository.insert(NewCashRegister(date(2024, 5, 11), Decimal("1")))
    later_id = repository.insert(
        NewCashRegister(date(2024, 5, 9), Decimal("2"))
    ).id

    assert repository.fetch_latest().id == later_id


def test_insert_rejects_duplicate_date(db_port) -> None:
    """The unique constraint on business_date surfaces as a domain error."""
    repository = SqlAlchemyCashRegisterRepository(db_port)
    repository.insert(NewCashRegister(date(2024, 5, 10), Decimal("100")))

    assert repository.exists_for_date(date(2024, 5, 10)) is True
    assert repository.exists_for_date(date(2024, 5, 11)) is False
    with pytest.raises(RegisterAlreadyExistsError):
        repository.insert(NewCashRegister(date(2024, 5, 10), Decimal("5")))
    assert len(repository.fetch_all()) == 1


def test_close_if_open_is_conditional(db_port) -> None:
    """Only the first close of a register updates it."""
    repository = SqlAlchemyCashRegisterRepository(db_port)
    register = repository.insert(
        NewCashRegister(date(2024, 5, 10), Decimal("100"))
    )

    closed = repository.close_if_open(register.id, Decimal("100"))
    second = repository.close_if_open(register.id, Decimal("50"))

    assert closed.is_open is False
    assert closed.closing_balance == Decimal("100")
    assert second is None
    assert repository.fetch_by_id(register.id).closing_balance == Decimal(
        "100"
    )


def test_close_if_open_unknown_register(db_port) -> None:
    repository = SqlAlchemyCashRegisterRepository(db_port)

    assert repository.close_if_open(404, Decimal("1")) is None


def test_insert_returns_the_stored_row(db_port) -> None:
    """The returned register carries the values the store kept."""
    repository = SqlAlchemyCashRegisterRepository(db_port)

    inserted = repository.insert(
        NewCashRegister(date(2024, 5, 10), Decimal("100.005"))
    )

    assert inserted == repository.fetch_by_id(inserted.id)
    assert inserted.opening_balance != Decimal("100.005")
