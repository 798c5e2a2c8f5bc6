"""HTTP views for the products app.

Each view validates its input (pydantic DTOs for bodies, integer parsing
for query parameters), calls ``ProductService`` inside
``persistence_boundary()`` and serializes products with ``ProductReadDTO``.
"""

from dataclasses import asdict

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.errors import persistence_boundary
from apps.common.schemas import parse_int_param, parse_payload
from apps.common.throttling import MethodScopedThrottleMixin

from . import providers
from .domain import (
    SKU,
    CategoryId,
    NewProduct,
    Price,
    Product,
    ProductDescription,
    ProductId,
    ProductName,
    StockQuantity,
)
from .schemas import CreateProductDTO, ProductReadDTO, UpdateProductDTO


def _serialize(product: Product) -> dict:
    return ProductReadDTO.model_validate(asdict(product)).model_dump(by_alias=True)


class ProductsCollectionView(MethodScopedThrottleMixin, APIView):
    read_scope = "products_list"
    write_scope = "products_write"

    def get(self, request):
        """List products, optionally filtered by ``?categoryId=``."""
        category_id = parse_int_param(request.query_params.get("categoryId"), "categoryId")
        service = providers.get_product_service()
        with persistence_boundary():
            if category_id is not None:
                products = service.find_by_category(CategoryId(category_id))
            else:
                products = service.find_all()
        return Response([_serialize(p) for p in products])

    def post(self, request):
        dto = parse_payload(CreateProductDTO, request.data)
        new_product = NewProduct(
            name=ProductName(dto.name),
            description=ProductDescription(dto.description) if dto.description is not None else None,
            price=Price(dto.price),
            sku=SKU(dto.sku),
            category_id=CategoryId(dto.category_id),
            stock_quantity=StockQuantity(dto.stock_quantity),
        )
        with persistence_boundary():
            product_id = providers.get_product_service().create(new_product)
        return Response({"id": product_id}, status=status.HTTP_201_CREATED)


class ProductDetailView(MethodScopedThrottleMixin, APIView):
    read_scope = "products_detail"
    write_scope = "products_write"

    def get(self, request, product_id: int):
        with persistence_boundary():
            product = providers.get_product_service().find_by_id(ProductId(product_id))
        return Response(_serialize(product))

    def put(self, request, product_id: int):
        """Partially update a product; fields missing from the body are kept."""
        dto = parse_payload(UpdateProductDTO, request.data)
        changes = dto.model_dump(exclude_unset=True)
        with persistence_boundary():
            product = providers.get_product_service().update(ProductId(product_id), changes)
        return Response(_serialize(product))

    def delete(self, request, product_id: int):
        with persistence_boundary():
            providers.get_product_service().delete(ProductId(product_id))
        return Response({"message": "Product deleted successfully"})
