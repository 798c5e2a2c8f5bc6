"""HTTP views for the orders app.

This module contains DRF API views used by the orders service. Views are
kept intentionally small: they validate requests (via Pydantic), map to
domain values, delegate to ``OrderService`` and return a response.

Every service call runs inside ``persistence_boundary()`` so database
errors reach the client as 404/400/500 according to their code, while
``NotFound`` raised by the service for an empty lookup passes straight
through to DRF.
"""

from dataclasses import asdict

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.errors import persistence_boundary
from apps.common.schemas import parse_int_param, parse_payload
from apps.common.throttling import MethodScopedThrottleMixin
from apps.products.domain import Price, ProductId
from apps.users.domain import UserId

from . import providers
from .domain import NewOrder, Order, OrderId, OrderItem, OrderStatus, Quantity
from .schemas import CreateOrderDTO, OrderReadDTO, UpdateOrderStatusDTO


def _serialize(order: Order) -> dict:
    return OrderReadDTO.model_validate(asdict(order)).model_dump(by_alias=True)


class OrdersCollectionView(MethodScopedThrottleMixin, APIView):
    """List orders (optionally for one user) and create new ones."""

    read_scope = "orders_list"
    write_scope = "orders_create"

    def get(self, request):
        user_id = parse_int_param(request.query_params.get("userId"), "userId")
        service = providers.get_order_service()
        with persistence_boundary():
            if user_id is not None:
                orders = service.find_by_user_id(UserId(user_id))
            else:
                orders = service.find_all()
        return Response([_serialize(o) for o in orders])

    def post(self, request):
        """Create a new order.

        Args:
            request (Request): DRF request with ``userId`` and a non-empty
                ``items`` list of ``{productId, quantity, unitPrice}``.

        Returns:
            Response: One of the following responses.
            - 201 with {id} when the order is created.
            - 400 for DTO validation errors or rejected references.
        """
        dto = parse_payload(CreateOrderDTO, request.data)
        new_order = NewOrder(
            user_id=UserId(dto.user_id),
            items=[
                OrderItem(
                    product_id=ProductId(i.product_id),
                    quantity=Quantity(i.quantity),
                    unit_price=Price(i.unit_price),
                )
                for i in dto.items
            ],
        )
        with persistence_boundary():
            order_id = providers.get_order_service().create(new_order)
        return Response({"id": order_id}, status=status.HTTP_201_CREATED)


class RetrieveOrderView(MethodScopedThrottleMixin, APIView):
    read_scope = "orders_detail"

    def get(self, request, order_id: int):
        with persistence_boundary():
            order = providers.get_order_service().find_by_id(OrderId(order_id))
        return Response(_serialize(order))


class OrderStatusView(MethodScopedThrottleMixin, APIView):
    write_scope = "orders_update"

    def patch(self, request, order_id: int):
        """Set the order status to the one given in the body.

        The previous status is not checked, so e.g. ``delivered`` ->
        ``pending`` is accepted.
        """
        dto = parse_payload(UpdateOrderStatusDTO, request.data)
        with persistence_boundary():
            order = providers.get_order_service().update_status(OrderId(order_id), OrderStatus(dto.status))
        return Response(_serialize(order))


class CancelOrderView(MethodScopedThrottleMixin, APIView):
    write_scope = "orders_update"

    def patch(self, request, order_id: int):
        with persistence_boundary():
            order = providers.get_order_service().cancel(OrderId(order_id))
        return Response(_serialize(order))


class UserOrdersTotalView(MethodScopedThrottleMixin, APIView):
    read_scope = "orders_detail"

    def get(self, request, user_id: int):
        with persistence_boundary():
            total = providers.get_order_service().calculate_total_by_user_id(UserId(user_id))
        return Response({"userId": user_id, "totalAmount": total})
