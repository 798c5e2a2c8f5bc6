"""Domain types and repository port for orders.

This module contains the order status enumeration, the branded primitive
types used across the orders app, frozen dataclasses for orders and line
items, the flat record shapes the persistence layer hands back, and the
``OrderRepositoryPort`` protocol the workflow service depends on.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, NewType, Optional, Protocol, Sequence, TypedDict

from apps.products.domain import Price, ProductId
from apps.users.domain import UserId


# ---- Enums ----
class OrderStatus(str, Enum):
    """Possible order statuses.

    Transitions are not restricted: any status may be written over any
    other. ``CANCELLED`` is terminal by convention only.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class InvalidStatus(ValueError):
    """A stored status string is not one of ``OrderStatus``."""


# ---- Branded primitives ----
OrderId = NewType("OrderId", int)
Quantity = NewType("Quantity", int)
TotalAmount = NewType("TotalAmount", Decimal)


# ---- Records (persistence shapes) ----
class OrderItemRecord(TypedDict):
    product_id: int
    quantity: int
    unit_price: Decimal


class OrderRecord(TypedDict):
    """Flat order row with its nested items, as read from storage."""

    id: int
    user_id: int
    status: str
    total_amount: Decimal
    created_at: datetime
    items: List[OrderItemRecord]


# ---- Entities / DTOs ----
@dataclass(frozen=True)
class OrderItem:
    """A line item with the unit price captured when the order was placed.

    Attributes:
        product_id: Product being ordered.
        quantity: Number of units, always positive.
        unit_price: Price snapshot, independent of the product's current price.
    """

    product_id: ProductId
    quantity: Quantity
    unit_price: Price


@dataclass(frozen=True)
class Order:
    """An order as seen by the rest of the application.

    Attributes:
        id: Persistent identifier.
        user_id: Owner of the order.
        status: Current ``OrderStatus``.
        total_amount: Sum of ``quantity * unit_price`` computed at creation.
        items: Line items in submission order.
        created_at: Creation timestamp.
    """

    id: OrderId
    user_id: UserId
    status: OrderStatus
    total_amount: TotalAmount
    items: List[OrderItem]
    created_at: datetime


@dataclass(frozen=True)
class NewOrder:
    """Validated input for order creation."""

    user_id: UserId
    items: Sequence[OrderItem]


# ---- Ports (DIP) ----
class OrderRepositoryPort(Protocol):
    """Port describing the order persistence operations.

    ``update_status`` raises ``PersistenceError`` with code ``P2025`` when
    the order does not exist.
    """

    def find_many(self, user_id: Optional[int] = None) -> List[OrderRecord]:
        raise NotImplementedError()

    def find_unique(self, order_id: int) -> Optional[OrderRecord]:
        raise NotImplementedError()

    def create_with_items(
        self, user_id: int, status: str, total_amount: Decimal, items: List[OrderItemRecord]
    ) -> OrderRecord:
        """Insert the order and all of its items as one atomic write."""
        raise NotImplementedError()

    def update_status(self, order_id: int, status: str) -> OrderRecord:
        raise NotImplementedError()

    def sum_total_amount(self, user_id: int, exclude_status: str) -> Optional[Decimal]:
        """Sum ``total_amount`` over the user's orders not in ``exclude_status``.

        Returns None when no rows match.
        """
        raise NotImplementedError()
