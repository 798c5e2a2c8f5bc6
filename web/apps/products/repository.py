"""Django ORM repository for products.

Returns flat ``ProductRecord`` rows so the service and mapper never see
ORM instances. ORM failures are translated into ``PersistenceError``.
"""

from typing import Any, Dict, List, Optional

from django.db import transaction

from apps.common.errors import PersistenceError
from apps.common.persistence import ensure_fits_column, translate_db_errors

from .domain import ProductRecord
from .models import ProductModel

COLUMNS = ("id", "name", "description", "price", "sku", "category_id", "stock_quantity", "created_at", "updated_at")


def _to_record(obj: ProductModel) -> ProductRecord:
    return {c: getattr(obj, c) for c in COLUMNS}  # type: ignore[return-value]


class ProductRepository:
    """Persists products using the Django ORM."""

    def find_many(self, category_id: Optional[int] = None) -> List[ProductRecord]:
        qs = ProductModel.objects.all()
        if category_id is not None:
            qs = qs.filter(category_id=category_id)
        with translate_db_errors():
            return [_to_record(o) for o in qs]

    def find_unique(self, product_id: int) -> Optional[ProductRecord]:
        with translate_db_errors():
            obj = ProductModel.objects.filter(id=product_id).first()
        return _to_record(obj) if obj else None

    def create(self, data: Dict[str, Any]) -> ProductRecord:
        ensure_fits_column(ProductModel, "price", data["price"])
        with translate_db_errors(), transaction.atomic():
            return _to_record(ProductModel.objects.create(**data))

    def update(self, product_id: int, data: Dict[str, Any]) -> ProductRecord:
        """Apply ``data`` to the product row and return the updated row.

        Raises:
            PersistenceError: ``P2025`` when the product does not exist,
                ``P2000`` when the new price does not fit the column.
        """
        if "price" in data:
            ensure_fits_column(ProductModel, "price", data["price"])
        with translate_db_errors("Record to update not found."), transaction.atomic():
            obj = ProductModel.objects.get(id=product_id)
            for field, value in data.items():
                setattr(obj, field, value)
            obj.save(update_fields=[*data.keys(), "updated_at"])
            return _to_record(obj)

    def delete(self, product_id: int) -> None:
        """Delete the product row.

        Raises:
            PersistenceError: ``P2025`` when there was nothing to delete.
        """
        with translate_db_errors(), transaction.atomic():
            deleted, _ = ProductModel.objects.filter(id=product_id).delete()
        if not deleted:
            raise PersistenceError("P2025", "Record to delete does not exist.")
