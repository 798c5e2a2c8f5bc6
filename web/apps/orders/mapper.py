"""Pure mapping from persisted order rows to ``Order`` values.

Construction helpers here are the only place primitives become order
brands. Nothing in this module performs I/O.
"""

from decimal import Decimal
from typing import Iterable

from apps.products.domain import Price, ProductId
from apps.users.domain import UserId

from .domain import (
    InvalidStatus,
    Order,
    OrderId,
    OrderItem,
    OrderItemRecord,
    OrderRecord,
    OrderStatus,
    Quantity,
    TotalAmount,
)


def create_order_status(value: str) -> OrderStatus:
    """Brand a status string.

    Raises:
        InvalidStatus: If ``value`` is not a known status.
    """
    try:
        return OrderStatus(value)
    except ValueError:
        raise InvalidStatus(f"Invalid order status: {value}") from None


def create_total_amount(value: Decimal) -> TotalAmount:
    return TotalAmount(value)


def create_order_item(item: OrderItemRecord) -> OrderItem:
    return OrderItem(
        product_id=ProductId(item["product_id"]),
        quantity=Quantity(item["quantity"]),
        unit_price=Price(item["unit_price"]),
    )


def map_order_record_to_domain(record: OrderRecord) -> Order:
    return Order(
        id=OrderId(record["id"]),
        user_id=UserId(record["user_id"]),
        status=create_order_status(record["status"]),
        total_amount=create_total_amount(record["total_amount"]),
        items=[create_order_item(i) for i in record["items"]],
        created_at=record["created_at"],
    )


def compute_order_total(items: Iterable[OrderItem]) -> TotalAmount:
    """Return ``sum(quantity * unit_price)``; zero for no items."""
    return create_total_amount(sum((i.unit_price * i.quantity for i in items), Decimal("0")))


def cancelled_status_value() -> OrderStatus:
    return create_order_status(OrderStatus.CANCELLED.value)
