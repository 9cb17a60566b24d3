"""Application ports package."""

from .cash_register_repository import CashRegisterRepositoryPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "CashRegisterRepositoryPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
]
