"""In-process stub adapter for ``ProductRepositoryPort``.

Used by service unit tests. Follows the same error contract as the ORM
repository: updating or deleting a missing row raises ``P2025``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from apps.common.errors import PersistenceError

from .domain import ProductRecord, ProductRepositoryPort


class InMemoryProductRepository(ProductRepositoryPort):
    def __init__(self):
        self._rows: Dict[int, ProductRecord] = {}
        self._next_id = 1

    def find_many(self, category_id: Optional[int] = None) -> List[ProductRecord]:
        return [
            dict(r)
            for r in self._rows.values()
            if category_id is None or r["category_id"] == category_id
        ]

    def find_unique(self, product_id: int) -> Optional[ProductRecord]:
        row = self._rows.get(product_id)
        return dict(row) if row else None

    def create(self, data: Dict[str, Any]) -> ProductRecord:
        if any(r["sku"] == data["sku"] for r in self._rows.values()):
            raise PersistenceError("P2002", "Unique constraint failed on the fields: (`sku`)")
        now = datetime.now(timezone.utc)
        row = {**data, "id": self._next_id, "created_at": now, "updated_at": now}
        self._rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    def update(self, product_id: int, data: Dict[str, Any]) -> ProductRecord:
        if product_id not in self._rows:
            raise PersistenceError("P2025", "Record to update not found.")
        row = self._rows[product_id]
        row.update(data)
        row["updated_at"] = datetime.now(timezone.utc)
        return dict(row)

    def delete(self, product_id: int) -> None:
        if self._rows.pop(product_id, None) is None:
            raise PersistenceError("P2025", "Record to delete does not exist.")
