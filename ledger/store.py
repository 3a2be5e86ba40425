"""In-memory transaction collection."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from .exceptions import RecordNotFoundError, ValidationError
from .models import Transaction, TransactionFields

logger = logging.getLogger(__name__)


class TransactionStore:
    """Owns the ordered transaction collection.

    Fields handed to the store are assumed valid; callers needing input checks
    go through :class:`ledger.services.LedgerService`. Unknown identifiers on
    ``update`` and ``delete`` are ignored.
    """

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        # dict keeps insertion order and in-place value replacement keeps position.
        self._transactions: Dict[str, Transaction] = {}
        for transaction in transactions or ():
            if transaction.id in self._transactions:
                raise ValidationError(f"Transaction {transaction.id} already exists")
            self._transactions[transaction.id] = transaction

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._transactions

    def create(self, fields: TransactionFields) -> Transaction:
        transaction_id = uuid4().hex
        while transaction_id in self._transactions:  # pragma: no cover - uuid collision
            transaction_id = uuid4().hex
        transaction = Transaction.from_fields(transaction_id, fields)
        self._transactions[transaction_id] = transaction
        logger.info(
            "Created %s transaction %s (%s)",
            transaction.type.value,
            transaction_id,
            transaction.amount,
        )
        return transaction

    def update(self, transaction_id: str, fields: TransactionFields) -> None:
        existing = self._transactions.get(transaction_id)
        if existing is None:
            logger.debug("Ignoring update for unknown transaction %s", transaction_id)
            return
        self._transactions[transaction_id] = existing.with_fields(fields)
        logger.info("Updated transaction %s", transaction_id)

    def delete(self, transaction_id: str) -> None:
        if self._transactions.pop(transaction_id, None) is None:
            logger.debug("Ignoring delete for unknown transaction %s", transaction_id)
            return
        logger.info("Deleted transaction %s", transaction_id)

    def get(self, transaction_id: str) -> Transaction:
        try:
            return self._transactions[transaction_id]
        except KeyError as exc:
            raise RecordNotFoundError(f"Transaction {transaction_id} not found") from exc

    def list(self) -> List[Transaction]:
        """Return transactions in insertion order."""
        return list(self._transactions.values())
