"""Validation helpers shared across ledger services."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict

from .exceptions import ValidationError
from .models import TransactionFields, TransactionType

CENTS = Decimal("0.01")
# Upper bound on any single amount, well inside the default decimal context.
MAX_AMOUNT = Decimal("999999999999999.99")


def quantize_cents(amount: Decimal) -> Decimal:
    """Round the amount to two decimal places using HALF_UP rounding."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_amount(raw: object, field: str) -> Decimal:
    """Convert raw input to a non-negative Decimal with exactly two fraction digits."""
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = Decimal(str(raw))
    except (InvalidOperation, TypeError) as exc:
        raise ValidationError(f"{field} must be a numeric value") from exc

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    if amount < 0:
        raise ValidationError(f"{field} cannot be negative")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"{field} is too large (maximum {MAX_AMOUNT})")

    return quantize_cents(amount)


def validate_required_str(value: object, field: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty")
    if len(trimmed) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return trimmed


def validate_date(value: object, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError(f"{field} must be an ISO 8601 date (YYYY-MM-DD)") from exc
    raise ValidationError(f"{field} must be a date or ISO 8601 string")


def validate_transaction_type(value: object, field: str = "type") -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    canonical = value.strip().lower()
    try:
        return TransactionType(canonical)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in TransactionType)
        raise ValidationError(f"{field} must be one of: {allowed}") from exc


def validate_transaction_payload(payload: Dict[str, object]) -> TransactionFields:
    """Normalise a raw payload into the fields accepted by the store."""
    if not isinstance(payload, dict):
        raise ValidationError("transaction payload must be an object")
    return TransactionFields(
        date=validate_date(payload.get("date"), "date"),
        description=validate_required_str(payload.get("description"), "description", 200),
        category=validate_required_str(payload.get("category"), "category", 50),
        amount=parse_amount(payload.get("amount"), "amount"),
        payment_method=validate_required_str(payload.get("payment_method"), "payment_method", 50),
        type=validate_transaction_type(payload.get("type")),
    )
