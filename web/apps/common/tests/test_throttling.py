"""Rate limits applied per method to the products and users endpoints."""

import pytest
from rest_framework.throttling import ScopedRateThrottle


@pytest.fixture
def tight_rates(monkeypatch):
    rates = {**ScopedRateThrottle.THROTTLE_RATES, "products_list": "2/min", "users_create": "1/min"}
    monkeypatch.setattr(ScopedRateThrottle, "THROTTLE_RATES", rates)
    return rates


@pytest.mark.django_db
def test_products_list_is_throttled(client, tight_rates):
    assert client.get("/api/products/").status_code == 200
    assert client.get("/api/products/").status_code == 200
    assert client.get("/api/products/").status_code == 429


@pytest.mark.django_db
def test_read_and_write_scopes_are_counted_separately(client, tight_rates):
    r = client.post("/api/users/", data={"email": "a@example.com"}, content_type="application/json")
    assert r.status_code == 201
    r = client.post("/api/users/", data={"email": "b@example.com"}, content_type="application/json")
    assert r.status_code == 429
    assert client.get("/api/users/").status_code == 200
