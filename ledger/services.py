"""Framework-agnostic business services for the finance ledger."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .adjustments import AdjustmentPolicy, ManualAdjustmentGenerator
from .aggregation import compute_aggregates
from .config import LedgerConfig
from .demo import DEMO_TRANSACTIONS
from .goals import DEFAULT_SAVINGS_GOAL, GoalTracker
from .models import Aggregates, GoalProgress, Transaction, TransactionFields
from .store import TransactionStore
from .validators import validate_transaction_payload, validate_transaction_type

logger = logging.getLogger(__name__)


class LedgerService:
    """Single entry point for front ends; all mutations go through here."""

    def __init__(
        self,
        store: Optional[TransactionStore] = None,
        goals: Optional[GoalTracker] = None,
        policy: AdjustmentPolicy = AdjustmentPolicy.STRICT,
    ) -> None:
        self._store = store if store is not None else TransactionStore()
        self._goals = goals if goals is not None else GoalTracker(DEFAULT_SAVINGS_GOAL)
        self._adjustments = ManualAdjustmentGenerator(self._store, policy)

    @classmethod
    def from_config(cls, config: LedgerConfig) -> "LedgerService":
        service = cls(
            goals=GoalTracker(config.savings_goal),
            policy=config.adjustment_policy,
        )
        if config.seed_demo:
            service.seed(DEMO_TRANSACTIONS)
        return service

    def seed(self, records: Iterable[TransactionFields]) -> List[Transaction]:
        created = [self._store.create(fields) for fields in records]
        logger.info("Seeded ledger with %s transactions", len(created))
        return created

    # Transactions ---------------------------------------------------------
    def list_transactions(self) -> List[Transaction]:
        return self._store.list()

    def get_transaction(self, transaction_id: str) -> Transaction:
        return self._store.get(transaction_id)

    def create_transaction(self, payload: Dict[str, object]) -> Transaction:
        fields = validate_transaction_payload(payload)
        return self._store.create(fields)

    def update_transaction(
        self, transaction_id: str, changes: Dict[str, object]
    ) -> Optional[Transaction]:
        """Apply ``changes`` over the stored fields; unknown ids are ignored."""
        if transaction_id not in self._store:
            logger.debug("Update requested for unknown transaction %s", transaction_id)
            return None
        existing = self._store.get(transaction_id)
        # Merge existing serialised data with incoming changes to support partial updates.
        merged_payload = {**existing.to_dict(), **changes}
        fields = validate_transaction_payload(merged_payload)
        self._store.update(transaction_id, fields)
        return self._store.get(transaction_id)

    def delete_transaction(self, transaction_id: str) -> None:
        self._store.delete(transaction_id)

    # Derived values -------------------------------------------------------
    def get_aggregates(self) -> Aggregates:
        return compute_aggregates(self._store.list())

    def get_goal_progress(self) -> GoalProgress:
        return self._goals.progress(self.get_aggregates().balance)

    def set_savings_goal(self, value: object) -> None:
        self._goals.set_savings_goal(value)

    def reconcile_manual_total(self, kind: object, new_total: object) -> Optional[Transaction]:
        return self._adjustments.reconcile(validate_transaction_type(kind, "kind"), new_total)

    def snapshot(self) -> Dict[str, object]:
        """Return a serialisable view of the whole session."""
        return {
            "transactions": [transaction.to_dict() for transaction in self._store.list()],
            "aggregates": self.get_aggregates().to_dict(),
            "goal": self.get_goal_progress().to_dict(),
        }
