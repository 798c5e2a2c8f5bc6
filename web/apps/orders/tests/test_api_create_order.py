"""API tests for the create-order endpoint.

These tests exercise the orders HTTP API for the main scenarios:
successful creation with a computed total, payload validation errors and
references the database rejects.
"""

from decimal import Decimal

import pytest

from apps.orders.models import OrderModel

CREATE_URL = "/api/orders/"


def payload(user, products):
    return {
        "userId": user.id,
        "items": [
            {"productId": products[0].id, "quantity": 2, "unitPrice": 50},
            {"productId": products[1].id, "quantity": 1, "unitPrice": 100},
        ],
    }


@pytest.mark.django_db
def test_create_order_returns_id_and_persists_pending_order(client, user, products):
    r = client.post(CREATE_URL, data=payload(user, products), content_type="application/json")
    assert r.status_code == 201
    order = OrderModel.objects.get(id=r.json()["id"])
    assert order.user_id == user.id
    assert order.status == "pending"
    assert order.total_amount == Decimal("200.00")
    assert order.items.count() == 2


@pytest.mark.django_db
def test_unit_price_is_a_snapshot(client, user, products):
    body = payload(user, products)
    body["items"][0]["unitPrice"] = 45.5
    r = client.post(CREATE_URL, data=body, content_type="application/json")
    assert r.status_code == 201
    order = OrderModel.objects.get(id=r.json()["id"])
    assert order.total_amount == Decimal("191.00")
    products[0].refresh_from_db()
    assert products[0].price == Decimal("50.00")


@pytest.mark.django_db
@pytest.mark.parametrize(
    "body",
    [
        {"userId": 1, "items": []},
        {"userId": 0, "items": [{"productId": 1, "quantity": 1, "unitPrice": 1}]},
        {"userId": 1, "items": [{"productId": 1, "quantity": 0, "unitPrice": 1}]},
        {"userId": 1, "items": [{"productId": 1, "quantity": 1, "unitPrice": 0}]},
        {"userId": 1, "items": [{"productId": -1, "quantity": 1, "unitPrice": 1}]},
        {"items": [{"productId": 1, "quantity": 1, "unitPrice": 1}]},
    ],
)
def test_create_order_validation_error(client, body):
    """Returns 400 when the payload fails DTO validation."""
    r = client.post(CREATE_URL, data=body, content_type="application/json")
    assert r.status_code == 400
    assert OrderModel.objects.count() == 0


@pytest.mark.django_db
def test_create_order_maps_persistence_error_through_classifier(client, monkeypatch):
    """A database failure during creation is classified at the boundary."""
    from apps.common.errors import PersistenceError
    from apps.orders import providers
    from apps.orders.adapters import InMemoryOrderRepository
    from apps.orders.service import OrderService

    class UnreachableRepository(InMemoryOrderRepository):
        def create_with_items(self, *args, **kwargs):
            raise PersistenceError("P1001", "Can't reach database server at db:5432")

    monkeypatch.setattr(providers, "get_order_service", lambda: OrderService(UnreachableRepository()))
    body = {"userId": 1, "items": [{"productId": 1, "quantity": 1, "unitPrice": 1}]}
    r = client.post(CREATE_URL, data=body, content_type="application/json")
    assert r.status_code == 500
    assert "db:5432" not in r.json()["detail"]


@pytest.mark.django_db
@pytest.mark.parametrize("unit_price", ["0.005", "1000000000000", "12.345"])
def test_unit_price_must_fit_the_money_column(client, user, products, unit_price):
    body = payload(user, products)
    body["items"][0]["unitPrice"] = unit_price
    r = client.post(CREATE_URL, data=body, content_type="application/json")
    assert r.status_code == 400
    assert OrderModel.objects.count() == 0


@pytest.mark.django_db
def test_order_total_over_column_precision_is_rejected(client, user, products):
    """Each item fits, but their sum does not fit ``total_amount``."""
    body = {
        "userId": user.id,
        "items": [{"productId": products[0].id, "quantity": 10000, "unitPrice": "9999999999.99"}],
    }
    r = client.post(CREATE_URL, data=body, content_type="application/json")
    assert r.status_code == 400
    assert "total_amount" in r.json()["detail"]
    assert OrderModel.objects.count() == 0


@pytest.mark.django_db
def test_stored_total_matches_stored_items(client, user, products):
    body = payload(user, products)
    body["items"][0]["unitPrice"] = "19.99"
    r = client.post(CREATE_URL, data=body, content_type="application/json")
    assert r.status_code == 201
    order = OrderModel.objects.get(id=r.json()["id"])
    assert order.total_amount == sum(i.quantity * i.unit_price for i in order.items.all())
