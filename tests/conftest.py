"""
Pytest configuration and shared fixtures for the catalog engine tests.
"""
import asyncio
from typing import Callable, Optional

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from shopassist.domain.data.seed_catalog import SEED_PRODUCTS
from shopassist.domain.models.product import Product
from shopassist.domain.repositories.product_store import ProductStore


# ============================================================================
# Fakes
# ============================================================================

class FakeRedis:
    """Minimal async stand-in for redis.asyncio.Redis (get/set/delete/ping)."""

    def __init__(self, fail_on: tuple = ()):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, Optional[int]] = {}
        self.fail_on = set(fail_on)

    def _maybe_fail(self, op: str):
        if op in self.fail_on:
            raise RedisConnectionError(f"fake redis down ({op})")

    async def get(self, key):
        self._maybe_fail("get")
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self._maybe_fail("set")
        self.data[key] = value
        self.ttls[key] = ex
        return True

    async def delete(self, key):
        self._maybe_fail("delete")
        return 1 if self.data.pop(key, None) is not None else 0

    async def ping(self):
        self._maybe_fail("ping")
        return True

    async def aclose(self):
        return None


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults; override any field."""
    def _make(product_id: str = "p1", **overrides) -> Product:
        data = {
            "product_id": product_id,
            "title": f"Item {product_id}",
            "brand": "TestBrand",
            "category": "Clothing",
            "categories": ["Clothing"],
            "tags": [],
            "price": "$10.00",
            "final_price": "$10.00",
            "rating": 4.0,
            "review_count": 10,
        }
        data.update(overrides)
        return Product.model_validate(data)
    return _make


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def seed_store() -> ProductStore:
    """Store loaded from the bundled seed catalog, no cache."""
    store = ProductStore(SEED_PRODUCTS)
    asyncio.run(store.load())
    return store


@pytest.fixture
def seed_products(seed_store) -> tuple:
    return seed_store.all()


@pytest.fixture
def make_redis() -> Callable[..., FakeRedis]:
    """FakeRedis factory, e.g. make_redis(fail_on=("get",)) for an unreachable backend."""
    return FakeRedis
