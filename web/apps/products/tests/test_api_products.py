"""API tests for the products endpoints."""

from decimal import Decimal

import pytest

from apps.orders.models import OrderItemModel, OrderModel
from apps.products.models import ProductModel

LIST_URL = "/api/products/"
DETAIL_URL = "/api/products/{pid}/"

PAYLOAD = {
    "name": "Mouse",
    "description": "Wireless",
    "price": 25.5,
    "sku": "MS-4321",
    "categoryId": 3,
    "stockQuantity": 8,
}


@pytest.mark.django_db
def test_create_product_returns_id(client):
    r = client.post(LIST_URL, data=PAYLOAD, content_type="application/json")
    assert r.status_code == 201
    obj = ProductModel.objects.get(id=r.json()["id"])
    assert obj.sku == "MS-4321"
    assert obj.price == Decimal("25.50")
    assert obj.category_id == 3


@pytest.mark.django_db
@pytest.mark.parametrize(
    "override",
    [
        {"sku": "bad sku"},
        {"price": 0},
        {"price": -3},
        {"price": "0.001"},
        {"price": "10000000000"},
        {"name": ""},
        {"categoryId": 0},
        {"stockQuantity": -1},
    ],
)
def test_create_product_validation_errors(client, override):
    r = client.post(LIST_URL, data={**PAYLOAD, **override}, content_type="application/json")
    assert r.status_code == 400


@pytest.mark.django_db
def test_duplicate_sku_is_bad_request(client, products):
    r = client.post(LIST_URL, data={**PAYLOAD, "sku": products[0].sku}, content_type="application/json")
    assert r.status_code == 400


@pytest.mark.django_db
def test_list_products_and_filter_by_category(client, products):
    r = client.get(LIST_URL)
    assert r.status_code == 200
    assert [p["sku"] for p in r.json()] == ["KB-1001", "MON-20001"]

    r = client.get(LIST_URL, {"categoryId": 2})
    assert [p["sku"] for p in r.json()] == ["MON-20001"]

    r = client.get(LIST_URL, {"categoryId": "abc"})
    assert r.status_code == 400


@pytest.mark.django_db
def test_get_product(client, products):
    r = client.get(DETAIL_URL.format(pid=products[1].id))
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Monitor"
    assert body["categoryId"] == 2
    assert body["stockQuantity"] == 3
    assert body["price"] == 100
    assert "createdAt" in body and "updatedAt" in body


@pytest.mark.django_db
def test_get_missing_product_returns_404(client):
    r = client.get(DETAIL_URL.format(pid=404))
    assert r.status_code == 404
    assert r.json()["detail"] == "Product with id 404 not found"


@pytest.mark.django_db
def test_put_updates_only_sent_fields(client, products):
    kb = products[0]
    r = client.put(DETAIL_URL.format(pid=kb.id), data={"stockQuantity": 0, "sku": "ZZ-0000"}, content_type="application/json")
    assert r.status_code == 200
    assert r.json()["stockQuantity"] == 0
    kb.refresh_from_db()
    assert kb.stock_quantity == 0
    assert kb.sku == "KB-1001"
    assert kb.price == Decimal("50.00")


@pytest.mark.django_db
def test_put_missing_product_returns_404(client):
    r = client.put(DETAIL_URL.format(pid=77), data={"name": "X"}, content_type="application/json")
    assert r.status_code == 404


@pytest.mark.django_db
def test_delete_product(client, products):
    r = client.delete(DETAIL_URL.format(pid=products[0].id))
    assert r.status_code == 200
    assert r.json() == {"message": "Product deleted successfully"}
    assert not ProductModel.objects.filter(id=products[0].id).exists()

    r = client.delete(DETAIL_URL.format(pid=products[0].id))
    assert r.status_code == 404


@pytest.mark.django_db
def test_delete_product_still_on_an_order_is_bad_request(client, user, products):
    order = OrderModel.objects.create(user=user, total_amount=Decimal("50.00"))
    OrderItemModel.objects.create(order=order, product=products[0], quantity=1, unit_price=Decimal("50.00"))
    r = client.delete(DETAIL_URL.format(pid=products[0].id))
    assert r.status_code == 400
    assert ProductModel.objects.filter(id=products[0].id).exists()


@pytest.mark.django_db
def test_put_rejects_sub_cent_price(client, products):
    kb = products[0]
    r = client.put(DETAIL_URL.format(pid=kb.id), data={"price": "0.001"}, content_type="application/json")
    assert r.status_code == 400
    kb.refresh_from_db()
    assert kb.price == Decimal("50.00")
