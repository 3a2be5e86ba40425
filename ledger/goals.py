"""Savings goal tracking."""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from .exceptions import ValidationError
from .models import GoalProgress
from .validators import parse_amount

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")
PERCENT_PLACES = Decimal("0.01")
DEFAULT_SAVINGS_GOAL = Decimal("2000.00")


class GoalTracker:
    """Holds the savings target and derives progress from a balance."""

    def __init__(self, savings_goal: Decimal = DEFAULT_SAVINGS_GOAL) -> None:
        self._savings_goal = Decimal("0.00")
        self.set_savings_goal(savings_goal)

    @property
    def savings_goal(self) -> Decimal:
        return self._savings_goal

    def set_savings_goal(self, value: object) -> None:
        try:
            goal = parse_amount(value, "savings_goal")
        except ValidationError:
            logger.warning("Rejected savings goal %r", value)
            raise
        self._savings_goal = goal
        logger.info("Savings goal set to %s", goal)

    def progress(self, balance: Decimal) -> GoalProgress:
        """Return progress toward the goal; a zero goal reports no progress."""
        goal = self._savings_goal
        if goal <= 0:
            ratio = Decimal("0")
        else:
            ratio = balance / goal * HUNDRED
        clamped = min(max(ratio, Decimal("0")), HUNDRED).quantize(PERCENT_PLACES)
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus the two fraction digits.
            ctx.prec = max(ctx.prec, ratio.adjusted() + 4)
            raw = ratio.quantize(PERCENT_PLACES)
        return GoalProgress(savings_goal=goal, progress_percent=clamped, raw_percent=raw)
