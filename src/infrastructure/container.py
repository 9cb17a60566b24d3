"""Composition root for wiring infrastructure adapters."""

from src.application.ports.cash_register_repository import (
    CashRegisterRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.close_register import CloseRegisterUseCase
from src.application.use_cases.get_last_closing_balance import (
    GetLastClosingBalanceUseCase,
)
from src.application.use_cases.get_register_report import (
    GetRegisterReportUseCase,
)
from src.application.use_cases.list_registers import ListRegistersUseCase
from src.application.use_cases.open_register import OpenRegisterUseCase
from src.application.use_cases.record_ledger_entry import (
    RecordLedgerEntryUseCase,
)
from src.infrastructure.cash_register_repository import (
    SqlAlchemyCashRegisterRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema
from src.infrastructure.settings import CajaSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter, creating tables when configured."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    if CajaSettings.from_env().auto_create_schema:
        create_schema(adapter.get_engine())
    return adapter


def build_register_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CashRegisterRepositoryPort:
    """Return the cash register repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCashRegisterRepository(resolved_db)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the sales and expenses repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_register_report_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetRegisterReportUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetRegisterReportUseCase(
        register_repository=build_register_repository(resolved_db),
        ledger_repository=build_ledger_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_list_registers_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListRegistersUseCase:
    resolved_db = db_port or build_database_adapter()
    return ListRegistersUseCase(
        register_repository=build_register_repository(resolved_db),
        ledger_repository=build_ledger_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_open_register_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> OpenRegisterUseCase:
    resolved_db = db_port or build_database_adapter()
    return OpenRegisterUseCase(
        register_repository=build_register_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_close_register_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CloseRegisterUseCase:
    resolved_db = db_port or build_database_adapter()
    return CloseRegisterUseCase(
        register_repository=build_register_repository(resolved_db),
        ledger_repository=build_ledger_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_last_closing_balance_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetLastClosingBalanceUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetLastClosingBalanceUseCase(
        register_repository=build_register_repository(resolved_db),
    )


def build_record_ledger_entry_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RecordLedgerEntryUseCase:
    resolved_db = db_port or build_database_adapter()
    return RecordLedgerEntryUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_register_repository",
    "build_ledger_repository",
    "build_register_report_use_case",
    "build_list_registers_use_case",
    "build_open_register_use_case",
    "build_close_register_use_case",
    "build_last_closing_balance_use_case",
    "build_record_ledger_entry_use_case",
]
