"""Shared fixtures for product catalog tests."""

import uuid
from collections import Counter

import pytest
import redis

from product_catalog.config import get_redis_client
from product_catalog.entities import Product
from product_catalog.exceptions import StoreUnavailableError
from product_catalog.repositories import InMemoryProductCache, InMemoryProductRepository
from product_catalog.services import ProductService


class SpyProductStore:
    """In-memory store that counts calls and can simulate an outage.

    Set ``unavailable`` to fail every call, or add operation names to
    ``failing`` to fail only those.
    """

    def __init__(self) -> None:
        self._inner = InMemoryProductRepository()
        self.calls: Counter[str] = Counter()
        self.unavailable = False
        self.failing: set[str] = set()

    def _record(self, name: str) -> None:
        self.calls[name] += 1
        if self.unavailable or name in self.failing:
            raise StoreUnavailableError(f"store down during {name}")

    def find_all(self) -> list[Product]:
        self._record("find_all")
        return self._inner.find_all()

    def find_by_id(self, product_id: str) -> Product | None:
        self._record("find_by_id")
        return self._inner.find_by_id(product_id)

    def find_by_category(self, category: str) -> list[Product]:
        self._record("find_by_category")
        return self._inner.find_by_category(category)

    def save(self, product: Product) -> Product:
        self._record("save")
        return self._inner.save(product)

    def exists_by_id(self, product_id: str) -> bool:
        self._record("exists_by_id")
        return self._inner.exists_by_id(product_id)

    def delete_by_id(self, product_id: str) -> None:
        self._record("delete_by_id")
        self._inner.delete_by_id(product_id)

    def delete_all(self) -> None:
        self._record("delete_all")
        self._inner.delete_all()

    def health_check(self) -> bool:
        return not self.unavailable


@pytest.fixture
def store():
    """A call-counting in-memory store."""
    return SpyProductStore()


@pytest.fixture
def cache():
    """An empty in-memory product cache."""
    return InMemoryProductCache(name=ProductService.CACHE_NAME)


@pytest.fixture
def service(store, cache):
    """A product service over the spy store and in-memory cache."""
    return ProductService(store=store, cache=cache)


@pytest.fixture
def chair(store):
    """A persisted product with id 'p1'. Store call counts are reset afterwards."""
    product = store.save(Product(id="p1", name="Chair", price=80.0, category="Furniture"))
    store.calls.clear()
    return product


@pytest.fixture
def redis_client():
    """A Redis client, or skip if no Redis server is reachable."""
    client = get_redis_client()
    try:
        client.ping()
    except redis.RedisError as e:
        pytest.skip(f"Redis is not running: {e}")
    yield client
    client.close()


@pytest.fixture
def redis_prefix(redis_client):
    """A unique key prefix, with every key under it deleted after the test."""
    prefix = f"test-{uuid.uuid4().hex[:8]}"
    yield prefix
    keys = list(redis_client.scan_iter(match=f"{prefix}*"))
    if keys:
        redis_client.delete(*keys)
