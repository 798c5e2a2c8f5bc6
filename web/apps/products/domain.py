"""Domain types and repository port for products.

Price, name, description and stock quantity can be updated; id, SKU and
category are fixed at creation.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, NewType, Optional, Protocol, TypedDict


# ---- Branded primitives ----
ProductId = NewType("ProductId", int)
Price = NewType("Price", Decimal)
ProductName = NewType("ProductName", str)
ProductDescription = NewType("ProductDescription", str)
SKU = NewType("SKU", str)
CategoryId = NewType("CategoryId", int)
StockQuantity = NewType("StockQuantity", int)


# ---- Records / Entities ----
class ProductRecord(TypedDict):
    """Flat product row as returned by the persistence layer."""

    id: int
    name: str
    description: Optional[str]
    price: Decimal
    sku: str
    category_id: int
    stock_quantity: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Product:
    id: ProductId
    name: ProductName
    description: Optional[ProductDescription]
    price: Price
    sku: SKU
    category_id: CategoryId
    stock_quantity: StockQuantity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewProduct:
    name: ProductName
    description: Optional[ProductDescription]
    price: Price
    sku: SKU
    category_id: CategoryId
    stock_quantity: StockQuantity


# ---- Ports (DIP) ----
class ProductRepositoryPort(Protocol):
    """Persistence operations the product service relies on.

    ``update`` and ``delete`` raise ``PersistenceError`` with code
    ``P2025`` when the row does not exist.
    """

    def find_many(self, category_id: Optional[int] = None) -> List[ProductRecord]:
        raise NotImplementedError()

    def find_unique(self, product_id: int) -> Optional[ProductRecord]:
        raise NotImplementedError()

    def create(self, data: Dict[str, Any]) -> ProductRecord:
        raise NotImplementedError()

    def update(self, product_id: int, data: Dict[str, Any]) -> ProductRecord:
        raise NotImplementedError()

    def delete(self, product_id: int) -> None:
        raise NotImplementedError()
