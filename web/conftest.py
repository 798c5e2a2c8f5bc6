from decimal import Decimal

import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def reset_throttle_counters():
    # DRF throttles keep their counters in the default cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db):
    from apps.users.models import UserModel

    return UserModel.objects.create(email="ada@example.com", name="Ada")


@pytest.fixture
def products(db):
    from apps.products.models import ProductModel

    return [
        ProductModel.objects.create(
            name="Keyboard", price=Decimal("50.00"), sku="KB-1001", category_id=1, stock_quantity=10
        ),
        ProductModel.objects.create(
            name="Monitor", price=Decimal("100.00"), sku="MON-20001", category_id=2, stock_quantity=3
        ),
    ]
