"""End-to-end test: create, cancel and total through the HTTP API.

The database is checked with raw SQL so the assertions do not depend on
the ORM mapping.
"""

from decimal import Decimal

import pytest
from django.db import connection

from apps.products.models import ProductModel
from apps.users.models import UserModel


@pytest.mark.django_db
def test_create_cancel_then_total_is_zero(client):
    UserModel.objects.create(id=101, email="u101@example.com")
    ProductModel.objects.create(id=1, name="A", price=Decimal("50"), sku="AA-0001", category_id=1, stock_quantity=5)
    ProductModel.objects.create(id=2, name="B", price=Decimal("100"), sku="BB-0002", category_id=1, stock_quantity=5)

    payload = {
        "userId": 101,
        "items": [
            {"productId": 1, "quantity": 2, "unitPrice": 50},
            {"productId": 2, "quantity": 1, "unitPrice": 100},
        ],
    }
    r = client.post("/api/orders/", data=payload, content_type="application/json")
    assert r.status_code == 201
    oid = r.json()["id"]

    with connection.cursor() as cur:
        cur.execute("select status, total_amount from orders where id = %s", [oid])
        status, total = cur.fetchone()
        cur.execute("select count(*) from order_items where order_id = %s", [oid])
        (item_count,) = cur.fetchone()
    assert status == "pending"
    assert Decimal(str(total)) == Decimal("200")
    assert item_count == 2

    r = client.patch(f"/api/orders/{oid}/cancel/")
    assert r.status_code == 200
    assert r.json()["status"] == "cancelled"

    r = client.get("/api/orders/users/101/total/")
    assert r.json() == {"userId": 101, "totalAmount": 0}
