"""Mapping between persisted product rows and the ``Product`` domain type.

Both directions are straight field-for-field re-tagging and cannot fail.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from .domain import (
    SKU,
    CategoryId,
    Price,
    Product,
    ProductDescription,
    ProductId,
    ProductName,
    ProductRecord,
    StockQuantity,
)


def create_product_id(value: int) -> ProductId:
    return ProductId(value)


def create_price(value: Decimal) -> Price:
    return Price(value)


def create_product_description(value: Optional[str]) -> Optional[ProductDescription]:
    return ProductDescription(value) if value is not None else None


def map_product_record_to_domain(record: ProductRecord) -> Product:
    return Product(
        id=create_product_id(record["id"]),
        name=ProductName(record["name"]),
        description=create_product_description(record["description"]),
        price=create_price(record["price"]),
        sku=SKU(record["sku"]),
        category_id=CategoryId(record["category_id"]),
        stock_quantity=StockQuantity(record["stock_quantity"]),
        created_at=record["created_at"],
        updated_at=record["updated_at"],
    )


def map_domain_product_to_record(product: Product) -> Dict[str, Any]:
    """Unbrand a product into the column set the repository writes.

    Timestamps are omitted; the database maintains them.
    """
    return {
        "id": int(product.id),
        "name": str(product.name),
        "description": product.description,
        "price": product.price,
        "sku": str(product.sku),
        "category_id": int(product.category_id),
        "stock_quantity": int(product.stock_quantity),
    }
