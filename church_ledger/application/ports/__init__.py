"""Application ports package."""

from .audit_repository import AuditLogRepositoryPort
from .budget_repository import BudgetRepositoryPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "AuditLogRepositoryPort",
    "BudgetRepositoryPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
]
