"""Pydantic schemas for the products API.

This module exposes the request schemas used to create and update
products and the read schema used to serialize them.
"""

import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from apps.common.schemas import CamelModel

SKU_RE = re.compile(r"^[A-Z]{2,3}-\d{4,6}$")


def _check_positive_price(v: Decimal) -> Decimal:
    if not math.isfinite(v) or v <= 0:
        raise ValueError("price must be a positive number")
    return v


class CreateProductDTO(CamelModel):
    """Schema for creating a product.

    Attributes:
        name: Non-empty product name.
        description: Optional free text.
        price: Positive, finite price with at most two decimal places.
        sku: Stock-keeping code such as ``AB-1234`` or ``ABC-123456``.
        category_id: Positive category identifier.
        stock_quantity: Units in stock, zero or more.
    """

    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(max_digits=12, decimal_places=2)
    sku: str = Field(min_length=1)
    category_id: int = Field(gt=0)
    stock_quantity: int = Field(ge=0)

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: Decimal) -> Decimal:
        return _check_positive_price(v)

    @field_validator("sku")
    @classmethod
    def validate_sku(cls, v: str) -> str:
        """Validate the SKU format.

        Raises:
            ValueError: When the SKU is not ``XX-XXXX`` .. ``XXX-XXXXXX``.
        """
        if not SKU_RE.match(v):
            raise ValueError("sku must be in format XX-XXXX or XXX-XXXXXX (e.g., AB-1234, ABC-123456)")
        return v


class UpdateProductDTO(CamelModel):
    """Partial update; only the fields sent by the client are applied."""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    stock_quantity: Optional[int] = Field(default=None, ge=0)

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            raise ValueError("price must be a positive number")
        return _check_positive_price(v)

    @field_validator("name", "stock_quantity")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field may not be null")
        return v


class ProductReadDTO(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    sku: str
    category_id: int
    stock_quantity: int
    created_at: datetime
    updated_at: datetime
