from __future__ import annotations

from decimal import Decimal

import pytest

from ledger.exceptions import ValidationError
from ledger.goals import DEFAULT_SAVINGS_GOAL, GoalTracker


def test_default_goal():
    assert GoalTracker().savings_goal == DEFAULT_SAVINGS_GOAL == Decimal("2000.00")


def test_progress_is_clamped_when_goal_exceeded():
    progress = GoalTracker(Decimal("2000")).progress(Decimal("4650"))

    assert progress.progress_percent == 100
    assert progress.raw_percent == Decimal("232.50")


def test_partial_progress():
    progress = GoalTracker(Decimal("2000")).progress(Decimal("500"))

    assert progress.progress_percent == Decimal("25.00")


def test_zero_goal_reports_no_progress():
    tracker = GoalTracker()
    tracker.set_savings_goal(0)

    progress = tracker.progress(Decimal("4650"))

    assert progress.progress_percent == 0
    assert progress.raw_percent == 0


def test_negative_balance_clamps_to_zero():
    progress = GoalTracker(Decimal("1000")).progress(Decimal("-250"))

    assert progress.progress_percent == 0
    assert progress.raw_percent == Decimal("-25.00")


def test_set_savings_goal_replaces_target():
    tracker = GoalTracker()
    tracker.set_savings_goal("3500.5")

    assert tracker.savings_goal == Decimal("3500.50")


@pytest.mark.parametrize("value", [-1, "abc", None])
def test_set_savings_goal_rejects_invalid(value):
    tracker = GoalTracker()

    with pytest.raises(ValidationError):
        tracker.set_savings_goal(value)
    assert tracker.savings_goal == DEFAULT_SAVINGS_GOAL


def test_progress_with_huge_ratio_does_not_overflow():
    tracker = GoalTracker(Decimal("0.01"))

    progress = tracker.progress(Decimal("1e24"))

    assert progress.progress_percent == 100
    assert progress.raw_percent == Decimal("1e28")
    assert progress.to_dict()["progress_percent"] == "100.00"
