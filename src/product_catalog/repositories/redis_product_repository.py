"""Redis implementation of ProductStore.

Each product is a Redis hash; two kinds of sets act as lookup tables:

    {prefix}:item:{id}             hash   name, price, category
    {prefix}:ids                   set    every product id
    {prefix}:category:{category}   set    ids in that category

Product hashes live under ``item:`` so no id can collide with an index key.
Writes read the current category under WATCH and apply every key change in
one MULTI/EXEC, retrying when the product changed in between.
"""

import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import redis

from product_catalog.config import get_redis_client, settings
from product_catalog.entities import Product
from product_catalog.exceptions import StoreUnavailableError


class RedisProductRepository:
    """Redis implementation of the ProductStore protocol.

    This class satisfies the ProductStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis product repository.

        Args:
            redis_client: Redis client created with ``decode_responses=True``.
                If None, creates default.
            key_prefix: Prefix for every key this repository writes.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.store_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisProductRepository":
        """Factory method to create RedisProductRepository with defaults.

        Args:
            key_prefix: Redis key prefix. If None, uses settings.

        Returns:
            Configured RedisProductRepository
        """
        return cls(key_prefix=key_prefix)

    def _key(self, product_id: str) -> str:
        return f"{self._prefix}:item:{product_id}"

    @property
    def _ids_key(self) -> str:
        return f"{self._prefix}:ids"

    def _category_key(self, category: str) -> str:
        return f"{self._prefix}:category:{category}"

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise StoreUnavailableError(f"Redis store unavailable during {operation}: {e}") from e

    def _load(self, product_ids: Iterable[str], category: str | None = None) -> list[Product]:
        """Fetch several products in one round trip, skipping vanished ids.

        When ``category`` is given, rows whose category no longer matches are
        dropped as well.
        """
        product_ids = sorted(product_ids)
        if not product_ids:
            return []

        pipe = self._client.pipeline(transaction=False)
        for product_id in product_ids:
            pipe.hgetall(self._key(product_id))
        rows = pipe.execute()

        return [
            self._to_product(product_id, row)
            for product_id, row in zip(product_ids, rows)
            if row and (category is None or row["category"] == category)
        ]

    @staticmethod
    def _to_product(product_id: str, row: dict[str, str]) -> Product:
        return Product(
            id=product_id,
            name=row["name"],
            price=float(row["price"]),
            category=row["category"],
        )

    def find_all(self) -> list[Product]:
        with self._guard("find_all"):
            return self._load(self._client.smembers(self._ids_key))

    def find_by_id(self, product_id: str) -> Product | None:
        with self._guard("find_by_id"):
            row = self._client.hgetall(self._key(product_id))
        if not row:
            return None
        return self._to_product(product_id, row)

    def find_by_category(self, category: str) -> list[Product]:
        with self._guard("find_by_category"):
            return self._load(self._client.smembers(self._category_key(category)), category=category)

    def save(self, product: Product) -> Product:
        """Insert or overwrite a product.

        A product without an id gets a fresh uuid4 hex id. The previous
        category is read under WATCH, so a concurrent change to the same
        product makes the transaction retry instead of leaving the id in two
        category sets.
        """
        if not product.is_persisted:
            product = product.with_id(uuid.uuid4().hex)

        key = self._key(product.id)

        def write(pipe: redis.client.Pipeline) -> None:
            previous_category = pipe.hget(key, "category")

            pipe.multi()
            pipe.hset(
                key,
                mapping={
                    "name": product.name,
                    "price": repr(float(product.price)),
                    "category": product.category,
                },
            )
            pipe.sadd(self._ids_key, product.id)
            if previous_category is not None and previous_category != product.category:
                pipe.srem(self._category_key(previous_category), product.id)
            pipe.sadd(self._category_key(product.category), product.id)

        with self._guard("save"):
            self._client.transaction(write, key)

        return product

    def exists_by_id(self, product_id: str) -> bool:
        with self._guard("exists_by_id"):
            return bool(self._client.exists(self._key(product_id)))

    def delete_by_id(self, product_id: str) -> None:
        key = self._key(product_id)

        def remove(pipe: redis.client.Pipeline) -> None:
            category = pipe.hget(key, "category")

            pipe.multi()
            pipe.delete(key)
            pipe.srem(self._ids_key, product_id)
            if category is not None:
                pipe.srem(self._category_key(category), product_id)

        with self._guard("delete_by_id"):
            self._client.transaction(remove, key)

    def delete_all(self) -> None:
        with self._guard("delete_all"):
            keys = list(self._client.scan_iter(match=f"{self._prefix}:*"))
            if keys:
                self._client.delete(*keys)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def get_stats(self) -> dict:
        """Get repository statistics."""
        with self._guard("get_stats"):
            total = self._client.scard(self._ids_key)
        return {"backend": "redis", "key_prefix": self._prefix, "total_products": total}

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
