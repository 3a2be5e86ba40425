"""Pure aggregate computations over a transaction sequence."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .models import Aggregates, Transaction, TransactionType

ZERO = Decimal("0.00")


def total_for(transactions: Iterable[Transaction], kind: TransactionType) -> Decimal:
    """Sum the amounts of ``kind`` transactions, in sequence order."""
    return sum(
        (transaction.amount for transaction in transactions if transaction.type is kind),
        start=ZERO,
    )


def compute_aggregates(transactions: Iterable[Transaction]) -> Aggregates:
    records = list(transactions)
    total_income = total_for(records, TransactionType.INCOME)
    total_expenses = total_for(records, TransactionType.EXPENSE)
    return Aggregates(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )
