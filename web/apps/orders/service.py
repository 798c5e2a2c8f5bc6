"""Order workflow service.

``OrderService`` owns the order lifecycle: creation with a computed total,
reads, status changes, cancellation and the per-user running total. All
state lives behind an ``OrderRepositoryPort``; the service itself keeps
none between calls.
"""

import logging
from decimal import Decimal
from typing import List

from apps.common.errors import NotFound
from apps.products.domain import Price
from apps.users.domain import UserId

from .domain import NewOrder, Order, OrderId, OrderRepositoryPort, OrderStatus
from .mapper import cancelled_status_value, compute_order_total, map_order_record_to_domain

logger = logging.getLogger(__name__)


class OrderService:
    """Domain service for placing and tracking orders.

    Args:
        repository: Persistence port used for every read and write.
    """

    def __init__(self, repository: OrderRepositoryPort):
        self.repository = repository

    def find_all(self) -> List[Order]:
        return [map_order_record_to_domain(r) for r in self.repository.find_many()]

    def find_by_user_id(self, user_id: UserId) -> List[Order]:
        return [map_order_record_to_domain(r) for r in self.repository.find_many(user_id=user_id)]

    def find_by_id(self, order_id: OrderId) -> Order:
        """Return a single order.

        Raises:
            NotFound: If no order has this id.
        """
        record = self.repository.find_unique(order_id)
        if record is None:
            raise NotFound(f"Order with id {order_id} not found")
        return map_order_record_to_domain(record)

    def create(self, new_order: NewOrder) -> OrderId:
        """Place a new ``pending`` order and return its id.

        The total is computed from the submitted items and stored with the
        order; later product price changes do not affect it. Order and items
        are written together in one compound write.
        """
        total = compute_order_total(new_order.items)
        record = self.repository.create_with_items(
            user_id=new_order.user_id,
            status=OrderStatus.PENDING.value,
            total_amount=total,
            items=[
                {"product_id": i.product_id, "quantity": i.quantity, "unit_price": i.unit_price}
                for i in new_order.items
            ],
        )
        logger.info(
            "order created",
            extra={"order_id": record["id"], "user_id": new_order.user_id, "total_amount": str(total)},
        )
        return OrderId(record["id"])

    def update_status(self, order_id: OrderId, status: OrderStatus) -> Order:
        """Overwrite the order status.

        The current status is not inspected; any status can follow any
        other.

        Raises:
            PersistenceError: ``P2025`` when the order does not exist.
        """
        record = self.repository.update_status(order_id, OrderStatus(status).value)
        logger.info("order status updated", extra={"order_id": order_id, "status": record["status"]})
        return map_order_record_to_domain(record)

    def cancel(self, order_id: OrderId) -> Order:
        """Set the order status to ``cancelled`` whatever it was before."""
        return self.update_status(order_id, cancelled_status_value())

    def calculate_total_by_user_id(self, user_id: UserId) -> Price:
        """Sum ``total_amount`` over the user's orders that are not cancelled.

        Returns zero when the user has no such orders.
        """
        total = self.repository.sum_total_amount(user_id, exclude_status=cancelled_status_value().value)
        return Price(total or Decimal("0"))
