"""Core business logic package for the finance ledger."""

from .adjustments import AdjustmentPolicy, ManualAdjustmentGenerator
from .aggregation import compute_aggregates, total_for
from .config import LedgerConfig
from .exceptions import LedgerError, RecordNotFoundError, ValidationError
from .goals import GoalTracker
from .models import Aggregates, GoalProgress, Transaction, TransactionFields, TransactionType
from .services import LedgerService
from .store import TransactionStore

__all__ = [
    "AdjustmentPolicy",
    "Aggregates",
    "GoalProgress",
    "GoalTracker",
    "LedgerConfig",
    "LedgerError",
    "LedgerService",
    "ManualAdjustmentGenerator",
    "RecordNotFoundError",
    "Transaction",
    "TransactionFields",
    "TransactionStore",
    "TransactionType",
    "ValidationError",
    "compute_aggregates",
    "total_for",
]
