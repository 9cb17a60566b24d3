"""Application use cases package."""

from .close_register import CloseRegisterUseCase
from .get_last_closing_balance import GetLastClosingBalanceUseCase
from .get_register_report import GetRegisterReportUseCase, RegisterReport
from .ledger_aggregator import LedgerAggregator, LedgerTotals
from .list_registers import ListRegistersUseCase
from .open_register import OpenRegisterUseCase
from .record_ledger_entry import RecordLedgerEntryUseCase

__all__ = [
    "CloseRegisterUseCase",
    "GetLastClosingBalanceUseCase",
    "GetRegisterReportUseCase",
    "RegisterReport",
    "LedgerAggregator",
    "LedgerTotals",
    "ListRegistersUseCase",
    "OpenRegisterUseCase",
    "RecordLedgerEntryUseCase",
]
