"""Pydantic schemas for orders.

This module exposes the request/validation schemas used by the orders
API and the read schema used to serialize ``Order`` values. Wire keys
are camelCase (``userId``, ``unitPrice``).
"""

import math
from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from apps.common.schemas import CamelModel

from .domain import OrderStatus


class OrderItemIn(CamelModel):
    """Input schema for a single order line item.

    Attributes:
        product_id: Positive product identifier.
        quantity: Positive integer indicating units requested.
        unit_price: Positive, finite unit price captured for this order, at
            most two decimal places and twelve digits.
    """

    product_id: int = Field(gt=0)
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(max_digits=12, decimal_places=2)

    @field_validator("unit_price")
    @classmethod
    def validate_unit_price(cls, v: Decimal) -> Decimal:
        """Reject zero, negative and non-finite prices.

        Raises:
            ValueError: When the price is not a positive number.
        """
        if not math.isfinite(v) or v <= 0:
            raise ValueError("unitPrice must be a positive number")
        return v


class CreateOrderDTO(CamelModel):
    """Schema for creating an order.

    Attributes:
        user_id: Owner of the order.
        items: At least one ``OrderItemIn``.
    """

    user_id: int = Field(gt=0)
    items: list[OrderItemIn] = Field(min_length=1)


class UpdateOrderStatusDTO(CamelModel):
    status: OrderStatus


class OrderItemReadDTO(CamelModel):
    product_id: int
    quantity: int
    unit_price: Decimal


class OrderReadDTO(CamelModel):
    id: int
    user_id: int
    status: OrderStatus
    total_amount: Decimal
    items: list[OrderItemReadDTO]
    created_at: datetime
