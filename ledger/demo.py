"""Sample transactions used to seed a demonstration session."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List

from .models import TransactionFields, TransactionType

DEMO_TRANSACTIONS: List[TransactionFields] = [
    TransactionFields(
        date=date(2024, 3, 1),
        description="Salary",
        category="Work",
        amount=Decimal("5000.00"),
        payment_method="Bank Transfer",
        type=TransactionType.INCOME,
    ),
    TransactionFields(
        date=date(2024, 3, 2),
        description="Supermarket",
        category="Groceries",
        amount=Decimal("350.00"),
        payment_method="Debit Card",
        type=TransactionType.EXPENSE,
    ),
    TransactionFields(
        date=date(2024, 3, 3),
        description="Restaurant",
        category="Leisure",
        amount=Decimal("120.00"),
        payment_method="Cash",
        type=TransactionType.EXPENSE,
    ),
]
