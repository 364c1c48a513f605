"""Redis implementation of ProductCache.

Entries are JSON strings stored under ``{namespace}:{name}:{key}``. A
remembered miss is stored as ``{"absent": true}`` so it reads back as
``CachedProduct.absent()`` rather than "not cached".
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict

import redis

from product_catalog.config import get_redis_client, settings
from product_catalog.entities import CachedProduct, Product
from product_catalog.exceptions import CacheUnavailableError


class RedisProductCache:
    """Redis-backed product cache.

    Satisfies the ProductCache protocol. Redis commands are atomic, so
    concurrent callers need no extra locking here.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        name: str = "products",
        namespace: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis cache.

        Args:
            redis_client: Redis client created with ``decode_responses=True``.
                If None, creates default.
            name: Cache name, part of every key.
            namespace: Key namespace shared by all caches. Defaults to settings.
            ttl: Entry time-to-live in seconds; 0 disables expiry. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._name = name
        self._namespace = namespace or settings.cache_namespace
        self._ttl = settings.cache_ttl if ttl is None else ttl

    @classmethod
    def create(cls, name: str = "products", ttl: int | None = None) -> "RedisProductCache":
        """Factory method to create RedisProductCache with defaults."""
        return cls(name=name, ttl=ttl)

    @property
    def name(self) -> str:
        return self._name

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{self._name}:{key}"

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise CacheUnavailableError(f"Redis cache unavailable during {operation}: {e}") from e

    @staticmethod
    def _encode(value: CachedProduct) -> str:
        if value.is_absent:
            return json.dumps({"absent": True})
        return json.dumps({"product": asdict(value.product)})

    @staticmethod
    def _decode(raw: str) -> CachedProduct:
        data = json.loads(raw)
        if data.get("absent"):
            return CachedProduct.absent()
        return CachedProduct.of(Product(**data["product"]))

    def get(self, key: str) -> CachedProduct | None:
        with self._guard("get"):
            raw = self._client.get(self._key(key))
        if raw is None:
            return None
        return self._decode(raw)

    def put(self, key: str, value: CachedProduct) -> None:
        with self._guard("put"):
            self._client.set(self._key(key), self._encode(value), ex=self._ttl or None)

    def evict(self, key: str) -> bool:
        with self._guard("evict"):
            return self._client.delete(self._key(key)) > 0

    def clear(self) -> int:
        """Delete every key of this cache, leaving other caches in the namespace alone."""
        with self._guard("clear"):
            keys = list(self._client.scan_iter(match=self._key("*")))
            if not keys:
                return 0
            return self._client.delete(*keys)

    def health_check(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def ttl(self) -> int:
        return self._ttl
