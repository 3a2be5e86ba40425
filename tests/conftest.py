"""Shared fixtures for the finance ledger tests."""

from __future__ import annotations

import pytest

from ledger.services import LedgerService


@pytest.fixture
def income_payload():
    return {
        "date": "2024-03-01",
        "description": "Salary",
        "category": "Work",
        "amount": 5000,
        "payment_method": "Bank Transfer",
        "type": "income",
    }


@pytest.fixture
def expense_payload():
    return {
        "date": "2024-03-02",
        "description": "Supermarket",
        "category": "Groceries",
        "amount": "350",
        "payment_method": "Debit Card",
        "type": "expense",
    }


@pytest.fixture
def service() -> LedgerService:
    return LedgerService()
