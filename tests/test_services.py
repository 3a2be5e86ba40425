from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ledger.adjustments import AdjustmentPolicy
from ledger.config import LedgerConfig
from ledger.exceptions import RecordNotFoundError, ValidationError
from ledger.models import TransactionType
from ledger.services import LedgerService


def test_empty_ledger_aggregates_are_zero(service):
    aggregates = service.get_aggregates()

    assert (aggregates.total_income, aggregates.total_expenses, aggregates.balance) == (0, 0, 0)


def test_income_and_expense_scenario(service, income_payload, expense_payload):
    service.create_transaction(income_payload)
    service.create_transaction(expense_payload)

    aggregates = service.get_aggregates()

    assert aggregates.total_income == 5000
    assert aggregates.total_expenses == 350
    assert aggregates.balance == 4650
    assert service.get_aggregates() == aggregates


def test_goal_progress_clamped_and_degenerate(service, income_payload, expense_payload):
    service.create_transaction(income_payload)
    service.create_transaction(expense_payload)
    service.set_savings_goal(2000)

    assert service.get_goal_progress().progress_percent == 100

    service.set_savings_goal(0)
    assert service.get_goal_progress().progress_percent == 0


def test_reconcile_manual_income_total(service, income_payload):
    service.create_transaction(income_payload)

    adjustment = service.reconcile_manual_total("income", 6000)

    assert adjustment.type is TransactionType.INCOME
    assert adjustment.amount == Decimal("1000.00")
    assert service.list_transactions()[-1] == adjustment
    assert service.get_aggregates().total_income == 6000


def test_reconcile_rejects_unknown_kind(service):
    with pytest.raises(ValidationError):
        service.reconcile_manual_total("transfer", 10)


def test_delete_unknown_id_leaves_state_unchanged(service, income_payload):
    service.create_transaction(income_payload)
    before = (service.list_transactions(), service.get_aggregates())

    service.delete_transaction("does-not-exist")

    assert (service.list_transactions(), service.get_aggregates()) == before


def test_create_normalises_payload(service, income_payload):
    income_payload.update(description="  Salary  ", type=" INCOME ", amount="10.005")

    transaction = service.create_transaction(income_payload)

    assert transaction.description == "Salary"
    assert transaction.type is TransactionType.INCOME
    assert transaction.amount == Decimal("10.01")
    assert transaction.date == date(2024, 3, 1)


def test_create_rejects_malformed_payload(service, income_payload):
    income_payload["amount"] = -1

    with pytest.raises(ValidationError):
        service.create_transaction(income_payload)
    assert service.list_transactions() == []


def test_update_merges_partial_changes(service, income_payload, expense_payload):
    first = service.create_transaction(income_payload)
    second = service.create_transaction(expense_payload)

    updated = service.update_transaction(first.id, {"amount": "5200", "category": "Bonus"})

    assert updated.id == first.id
    assert updated.amount == Decimal("5200.00")
    assert updated.category == "Bonus"
    assert updated.description == first.description
    assert [t.id for t in service.list_transactions()] == [first.id, second.id]


def test_update_unknown_id_returns_none(service, income_payload):
    assert service.update_transaction("missing", income_payload) is None
    assert service.list_transactions() == []


def test_update_with_invalid_change_keeps_original(service, income_payload):
    created = service.create_transaction(income_payload)

    with pytest.raises(ValidationError):
        service.update_transaction(created.id, {"type": "refund"})
    assert service.get_transaction(created.id) == created


def test_get_transaction_unknown_raises(service):
    with pytest.raises(RecordNotFoundError):
        service.get_transaction("missing")


def test_from_config_seeds_demo_and_goal():
    config = LedgerConfig(
        savings_goal=Decimal("1000.00"),
        seed_demo=True,
        adjustment_policy=AdjustmentPolicy.ADDITIVE,
    )

    service = LedgerService.from_config(config)

    assert len(service.list_transactions()) == 3
    assert service.get_aggregates().balance == Decimal("4530.00")
    assert service.get_goal_progress().savings_goal == Decimal("1000.00")
    # additive policy accepts a lower target
    assert service.reconcile_manual_total("income", 1) is not None


def test_snapshot_is_serialisable(service, income_payload):
    service.create_transaction(income_payload)

    snapshot = service.snapshot()

    assert snapshot["aggregates"]["balance"] == "5000.00"
    assert snapshot["goal"]["progress_percent"] == "100.00"
    assert snapshot["transactions"][0]["type"] == "income"
