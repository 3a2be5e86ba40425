"""Data models for the finance ledger domain."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict

__all__ = [
    "Aggregates",
    "GoalProgress",
    "Transaction",
    "TransactionFields",
    "TransactionType",
    "format_amount",
]


class TransactionType(str, Enum):
    """Whether a transaction adds to or subtracts from the balance."""

    INCOME = "income"
    EXPENSE = "expense"


def format_amount(value: Decimal, symbol: str = "") -> str:
    """Render an amount with thousands separators and two fraction digits."""
    rendered = f"{value:,.2f}"
    return f"{symbol} {rendered}" if symbol else rendered


@dataclass(frozen=True)
class TransactionFields:
    """Every editable transaction field; the identifier is owned by the store."""

    date: date
    description: str
    category: str
    amount: Decimal
    payment_method: str
    type: TransactionType


@dataclass(frozen=True)
class Transaction:
    id: str
    date: date
    description: str
    category: str
    amount: Decimal
    payment_method: str
    type: TransactionType

    @classmethod
    def from_fields(cls, transaction_id: str, fields: TransactionFields) -> "Transaction":
        return cls(
            id=transaction_id,
            date=fields.date,
            description=fields.description,
            category=fields.category,
            amount=fields.amount,
            payment_method=fields.payment_method,
            type=fields.type,
        )

    def fields(self) -> TransactionFields:
        return TransactionFields(
            date=self.date,
            description=self.description,
            category=self.category,
            amount=self.amount,
            payment_method=self.payment_method,
            type=self.type,
        )

    def with_fields(self, fields: TransactionFields) -> "Transaction":
        """Return a copy carrying ``fields`` under the same identifier."""
        return replace(
            self,
            date=fields.date,
            description=fields.description,
            category=fields.category,
            amount=fields.amount,
            payment_method=fields.payment_method,
            type=fields.type,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the transaction to JSON-friendly natives."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "category": self.category,
            "amount": f"{self.amount:.2f}",
            "payment_method": self.payment_method,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class Aggregates:
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_income": f"{self.total_income:.2f}",
            "total_expenses": f"{self.total_expenses:.2f}",
            "balance": f"{self.balance:.2f}",
        }


@dataclass(frozen=True)
class GoalProgress:
    savings_goal: Decimal
    progress_percent: Decimal
    # Unclamped ratio; may exceed 100 or drop below 0.
    raw_percent: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "savings_goal": f"{self.savings_goal:.2f}",
            "progress_percent": f"{self.progress_percent:.2f}",
            "raw_percent": f"{self.raw_percent:.2f}",
        }
