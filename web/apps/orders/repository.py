"""Repository layer for persisting orders.

This module implements ``OrderRepositoryPort`` with the Django ORM. It
keeps a thin interface that returns flat ``OrderRecord`` dicts (with the
nested items) so the domain layer is not coupled to ORM types. Every ORM
call runs under ``translate_db_errors`` and surfaces failures as
``PersistenceError``.
"""

from decimal import Decimal
from typing import List, Optional

from django.db import transaction
from django.db.models import Sum

from apps.common.persistence import ensure_fits_column, translate_db_errors

from .domain import OrderItemRecord, OrderRecord
from .models import OrderItemModel, OrderModel


def _to_record(obj: OrderModel) -> OrderRecord:
    return {
        "id": obj.id,
        "user_id": obj.user_id,
        "status": obj.status,
        "total_amount": obj.total_amount,
        "created_at": obj.created_at,
        "items": [
            {"product_id": i.product_id, "quantity": i.quantity, "unit_price": i.unit_price}
            for i in obj.items.all()
        ],
    }


class OrderRepository:
    """Repository that persists orders and their items using Django ORM."""

    def _queryset(self):
        return OrderModel.objects.prefetch_related("items")

    def find_many(self, user_id: Optional[int] = None) -> List[OrderRecord]:
        qs = self._queryset()
        if user_id is not None:
            qs = qs.filter(user_id=user_id)
        with translate_db_errors():
            return [_to_record(o) for o in qs]

    def find_unique(self, order_id: int) -> Optional[OrderRecord]:
        with translate_db_errors():
            obj = self._queryset().filter(id=order_id).first()
        return _to_record(obj) if obj else None

    def create_with_items(
        self, user_id: int, status: str, total_amount: Decimal, items: List[OrderItemRecord]
    ) -> OrderRecord:
        """Insert an order with its items in a single transaction.

        Args:
            user_id: Owner of the order.
            status: Initial status value.
            total_amount: Precomputed order total.
            items: Line items to attach to the order.

        Returns:
            The persisted order as an ``OrderRecord``.

        Raises:
            PersistenceError: When the database rejects the write, e.g.
                ``P2003`` for an unknown user or product, ``P2000`` for a
                total or unit price the money columns cannot hold.
        """
        ensure_fits_column(OrderModel, "total_amount", total_amount)
        for i in items:
            ensure_fits_column(OrderItemModel, "unit_price", i["unit_price"])
        with translate_db_errors(), transaction.atomic():
            order = OrderModel.objects.create(user_id=user_id, status=status, total_amount=total_amount)
            OrderItemModel.objects.bulk_create(
                [
                    OrderItemModel(
                        order=order,
                        product_id=i["product_id"],
                        quantity=i["quantity"],
                        unit_price=i["unit_price"],
                    )
                    for i in items
                ]
            )
            return _to_record(self._queryset().get(id=order.id))

    def update_status(self, order_id: int, status: str) -> OrderRecord:
        with translate_db_errors("Record to update not found."), transaction.atomic():
            obj = self._queryset().get(id=order_id)
            obj.status = status
            obj.save(update_fields=["status"])
            return _to_record(obj)

    def sum_total_amount(self, user_id: int, exclude_status: str) -> Optional[Decimal]:
        with translate_db_errors():
            result = (
                OrderModel.objects.filter(user_id=user_id)
                .exclude(status=exclude_status)
                .aggregate(total=Sum("total_amount"))
            )
        return result["total"]
