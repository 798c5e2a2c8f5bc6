"""In-process stub adapter for the orders repository port.

``InMemoryOrderRepository`` implements ``OrderRepositoryPort`` without a
database. It is intended for unit tests of ``OrderService`` where
deterministic behavior is useful, and mirrors the ORM repository's error
contract (``P2025`` for a missing order on update).
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional

from apps.common.errors import PersistenceError

from .domain import OrderItemRecord, OrderRecord, OrderRepositoryPort


def _copy(row: OrderRecord) -> OrderRecord:
    return {**row, "items": [dict(i) for i in row["items"]]}


class InMemoryOrderRepository(OrderRepositoryPort):
    """Dict-backed order storage; ids are assigned sequentially from 1."""

    def __init__(self):
        self._rows: Dict[int, OrderRecord] = {}
        self._next_id = 1
        self.writes = 0

    def seed(self, user_id: int, status: str, total_amount: Decimal, items: Optional[List[OrderItemRecord]] = None) -> int:
        """Insert a row directly, bypassing the service. Returns its id."""
        row = self.create_with_items(user_id, status, total_amount, items or [])
        self.writes -= 1
        return row["id"]

    def find_many(self, user_id: Optional[int] = None) -> List[OrderRecord]:
        return [_copy(r) for r in self._rows.values() if user_id is None or r["user_id"] == user_id]

    def find_unique(self, order_id: int) -> Optional[OrderRecord]:
        row = self._rows.get(order_id)
        return _copy(row) if row else None

    def create_with_items(
        self, user_id: int, status: str, total_amount: Decimal, items: List[OrderItemRecord]
    ) -> OrderRecord:
        row: OrderRecord = {
            "id": self._next_id,
            "user_id": user_id,
            "status": status,
            "total_amount": total_amount,
            "created_at": datetime.now(timezone.utc),
            "items": [dict(i) for i in items],
        }
        self._rows[row["id"]] = row
        self._next_id += 1
        self.writes += 1
        return _copy(row)

    def update_status(self, order_id: int, status: str) -> OrderRecord:
        if order_id not in self._rows:
            raise PersistenceError("P2025", "Record to update not found.")
        self._rows[order_id]["status"] = status
        self.writes += 1
        return _copy(self._rows[order_id])

    def sum_total_amount(self, user_id: int, exclude_status: str) -> Optional[Decimal]:
        amounts = [
            r["total_amount"]
            for r in self._rows.values()
            if r["user_id"] == user_id and r["status"] != exclude_status
        ]
        return sum(amounts, Decimal("0")) if amounts else None
