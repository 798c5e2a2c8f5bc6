"""Wiring of ``ProductService`` with its ORM repository."""

from .repository import ProductRepository
from .service import ProductService


def get_product_service() -> ProductService:
    return ProductService(ProductRepository())
