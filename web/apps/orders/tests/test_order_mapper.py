"""Unit tests for the order mapper: totals, status guard and record mapping."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from apps.orders.domain import InvalidStatus, Order, OrderItem, OrderStatus
from apps.orders.mapper import (
    cancelled_status_value,
    compute_order_total,
    create_order_status,
    map_order_record_to_domain,
)

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def record(status="pending"):
    return {
        "id": 10,
        "user_id": 101,
        "status": status,
        "total_amount": Decimal("200.00"),
        "created_at": NOW,
        "items": [
            {"product_id": 1, "quantity": 2, "unit_price": Decimal("50.00")},
            {"product_id": 2, "quantity": 1, "unit_price": Decimal("100.00")},
        ],
    }


def test_compute_order_total_sums_quantity_times_price():
    items = [OrderItem(1, 2, Decimal("50")), OrderItem(2, 1, Decimal("100"))]
    assert compute_order_total(items) == Decimal("200")


def test_compute_order_total_of_no_items_is_zero():
    assert compute_order_total([]) == 0


def test_compute_order_total_keeps_cents():
    items = [OrderItem(1, 3, Decimal("0.10")), OrderItem(2, 1, Decimal("19.99"))]
    assert compute_order_total(items) == Decimal("20.29")


def test_map_order_record_to_domain():
    order = map_order_record_to_domain(record())
    assert isinstance(order, Order)
    assert order.id == 10
    assert order.user_id == 101
    assert order.status is OrderStatus.PENDING
    assert order.total_amount == Decimal("200.00")
    assert order.created_at == NOW
    assert order.items == [
        OrderItem(product_id=1, quantity=2, unit_price=Decimal("50.00")),
        OrderItem(product_id=2, quantity=1, unit_price=Decimal("100.00")),
    ]


@pytest.mark.parametrize("status", [s.value for s in OrderStatus])
def test_every_known_status_maps(status):
    assert map_order_record_to_domain(record(status)).status.value == status


def test_unknown_status_raises_invalid_status():
    with pytest.raises(InvalidStatus) as e:
        map_order_record_to_domain(record("bogus"))
    assert "bogus" in str(e.value)


def test_status_is_case_sensitive():
    with pytest.raises(InvalidStatus):
        create_order_status("PENDING")


def test_cancelled_status_value():
    assert cancelled_status_value() is OrderStatus.CANCELLED
