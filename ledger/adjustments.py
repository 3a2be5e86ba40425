"""Reconciliation of manually edited totals with the itemised ledger.

A manual total never rewrites history: the difference between the edited
value and the current sum is recorded as one extra transaction of the same
type. Because amounts are non-negative, such an entry can only raise a
total. The ``strict`` policy refuses edits that would need to lower it,
while ``additive`` records the absolute difference regardless, matching the
behaviour of the original spreadsheet.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Callable, Optional

from .aggregation import total_for
from .exceptions import ValidationError
from .models import Transaction, TransactionFields, TransactionType
from .store import TransactionStore
from .validators import parse_amount

logger = logging.getLogger(__name__)

ADJUSTMENT_CATEGORY = "Manual Adjustment"
ADJUSTMENT_PAYMENT_METHOD = "Manual Adjustment"
ADJUSTMENT_DESCRIPTIONS = {
    TransactionType.INCOME: "Manual income adjustment",
    TransactionType.EXPENSE: "Manual expense adjustment",
}


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class AdjustmentPolicy(str, Enum):
    STRICT = "strict"
    ADDITIVE = "additive"


class ManualAdjustmentGenerator:
    def __init__(
        self,
        store: TransactionStore,
        policy: AdjustmentPolicy = AdjustmentPolicy.STRICT,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._store = store
        self._policy = policy
        self._today = today or _utc_today

    @property
    def policy(self) -> AdjustmentPolicy:
        return self._policy

    def reconcile(self, kind: TransactionType, new_total: object) -> Optional[Transaction]:
        """Insert the entry that brings the ``kind`` total to ``new_total``.

        Returns the synthesized transaction, or ``None`` when the strict policy
        finds the total already matching. Under the strict policy a target below
        the current total raises ``ValidationError``, since a non-negative entry
        of the same type cannot lower it; the additive policy records the
        absolute difference instead, as the original spreadsheet did.
        """
        target = parse_amount(new_total, "new_total")
        current = total_for(self._store.list(), kind)
        delta = abs(target - current)

        if self._policy is AdjustmentPolicy.STRICT:
            if target < current:
                raise ValidationError(
                    f"Cannot lower total {kind.value} from {current:.2f} to {target:.2f} "
                    "with an adjustment; edit or delete the itemised entries instead"
                )
            if delta == 0:
                logger.debug("Total %s already at %s; no adjustment needed", kind.value, target)
                return None

        fields = TransactionFields(
            date=self._today(),
            description=ADJUSTMENT_DESCRIPTIONS[kind],
            category=ADJUSTMENT_CATEGORY,
            amount=delta,
            payment_method=ADJUSTMENT_PAYMENT_METHOD,
            type=kind,
        )
        adjustment = self._store.create(fields)
        logger.info(
            "Reconciled %s total %s -> %s with adjustment %s",
            kind.value,
            current,
            target,
            adjustment.id,
        )
        return adjustment
