"""Service provider helpers for wiring ``OrderService`` with its repository.

Views call ``get_order_service()`` through this module so tests can swap
the wiring (for example with ``InMemoryOrderRepository``) by patching a
single symbol.
"""

from .repository import OrderRepository
from .service import OrderService


def get_order_service() -> OrderService:
    """Return an ``OrderService`` backed by the Django ORM repository."""
    return OrderService(OrderRepository())
