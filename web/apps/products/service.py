"""Product service: CRUD with a category filter."""

import logging
from dataclasses import asdict
from typing import Any, Dict, List

from apps.common.errors import NotFound

from .domain import CategoryId, NewProduct, Product, ProductId, ProductRepositoryPort
from .mapper import create_product_id, map_product_record_to_domain

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "price", "stock_quantity")


class ProductService:
    """Orchestrates product reads and writes against a ``ProductRepositoryPort``."""

    def __init__(self, repository: ProductRepositoryPort):
        self.repository = repository

    def find_all(self) -> List[Product]:
        return [map_product_record_to_domain(r) for r in self.repository.find_many()]

    def find_by_id(self, product_id: ProductId) -> Product:
        """Return a single product.

        Raises:
            NotFound: If no product has this id.
        """
        record = self.repository.find_unique(product_id)
        if record is None:
            raise NotFound(f"Product with id {product_id} not found")
        return map_product_record_to_domain(record)

    def find_by_category(self, category_id: CategoryId) -> List[Product]:
        return [map_product_record_to_domain(r) for r in self.repository.find_many(category_id=category_id)]

    def create(self, new_product: NewProduct) -> ProductId:
        record = self.repository.create(asdict(new_product))
        logger.info("product created", extra={"product_id": record["id"], "sku": record["sku"]})
        return create_product_id(record["id"])

    def update(self, product_id: ProductId, changes: Dict[str, Any]) -> Product:
        """Merge ``changes`` into the stored product.

        Only the keys present in ``changes`` are written; unknown keys are
        ignored.

        Raises:
            PersistenceError: ``P2025`` when the product does not exist.
        """
        data = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        record = self.repository.update(product_id, data)
        return map_product_record_to_domain(record)

    def delete(self, product_id: ProductId) -> None:
        """Delete the product without checking for it first.

        Raises:
            PersistenceError: ``P2025`` when nothing was deleted, ``P2003``
                when order items still reference the product.
        """
        self.repository.delete(product_id)
        logger.info("product deleted", extra={"product_id": product_id})
