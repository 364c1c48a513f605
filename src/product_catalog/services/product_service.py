"""Product service with read-through caching.

Point lookups go through a named cache; list and category reads always go
to the store. Every mutation evicts the aggregate "all" key, and the
per-id entry is refreshed on update and evicted on delete.
"""

import structlog

from product_catalog.entities import CachedProduct, Product, ProductChanges
from product_catalog.models import CacheMetrics
from product_catalog.protocols import ProductCache, ProductStore
from product_catalog.repositories import InMemoryProductCache

logger = structlog.get_logger(__name__)


class ProductService:
    """Core product service.

    This service depends on PROTOCOLS, not concrete implementations:
    - ProductStore: can be Redis, in-memory, a document database, etc.
    - ProductCache: can be in-memory, Redis, etc.

    Missing products are normal outcomes reported as ``None`` (lookups,
    updates) or ``False`` (deletes). Store and cache faults propagate to the
    caller unchanged and are never cached.

    Example:
        ```python
        from product_catalog.repositories import InMemoryProductCache, RedisProductRepository
        from product_catalog.services import ProductService

        service = ProductService.create(
            store=RedisProductRepository.create(),
            cache=InMemoryProductCache(),
        )
        chair = service.create(Product(name="Chair", price=80, category="Furniture"))
        service.get_by_id(chair.id)  # store read, now cached
        service.get_by_id(chair.id)  # served from cache
        ```
    """

    CACHE_NAME = "products"
    ALL_KEY = "all"

    def __init__(self, store: ProductStore, cache: ProductCache) -> None:
        """Initialize the product service.

        Args:
            store: Product persistence backend (required).
            cache: Cache for point lookups (required).
        """
        self._store = store
        self._cache = cache
        self._metrics = CacheMetrics()

    @classmethod
    def create(cls, store: ProductStore, cache: ProductCache | None = None) -> "ProductService":
        """Factory method to create ProductService with sensible defaults.

        Args:
            store: Product persistence backend (required).
            cache: Cache backend. If None, uses an in-memory cache named "products".

        Returns:
            Configured ProductService instance
        """
        if cache is None:
            cache = InMemoryProductCache(name=cls.CACHE_NAME)
        return cls(store=store, cache=cache)

    def list_all(self) -> list[Product]:
        """Return every product. Always reads the store."""
        logger.info("fetching_all_products")
        return self._store.find_all()

    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by id, using the cache.

        Business logic:
        1. Return the cached entry if there is one (including a cached miss)
        2. Otherwise read the store
        3. Cache the outcome, present or absent, under the id

        Args:
            product_id: The product identifier

        Returns:
            The product, or None if it does not exist
        """
        cached = self._cache.get(product_id)
        if cached is not None:
            self._metrics.record_hit()
            logger.debug("fetching_product", product_id=product_id, cache="hit")
            return cached.product

        self._metrics.record_miss()
        logger.info("fetching_product", product_id=product_id, cache="miss")

        # A store fault raises here, before anything is cached
        product = self._store.find_by_id(product_id)
        self._put(product_id, CachedProduct.of(product))
        return product

    def get_by_category(self, category: str) -> list[Product]:
        """Return all products in a category. Always reads the store."""
        logger.info("fetching_products_by_category", category=category)
        return self._store.find_by_category(category)

    def create(self, product: Product) -> Product:
        """Persist a new product.

        The per-id cache is not pre-populated; the first lookup fills it.

        Args:
            product: Product without an id

        Returns:
            The persisted product carrying its store-assigned id
        """
        logger.info("creating_product", name=product.name, category=product.category)
        saved = self._store.save(product)
        self._evict(self.ALL_KEY)
        if product.is_persisted:
            # Saving with an explicit id overwrites a record that may be cached
            self._evict(saved.id)
        return saved

    def update(self, product_id: str, changes: ProductChanges) -> Product | None:
        """Apply changes to an existing product and refresh its cache entry.

        Business logic:
        1. Read the current record from the store; if missing, stop (cache untouched)
        2. Merge the changes into it
        3. Evict the aggregate key, then write to the store
        4. Put the merged product into the per-id cache entry

        Args:
            product_id: The product identifier
            changes: Fields to change; None fields keep their value

        Returns:
            The updated product, or None if it does not exist
        """
        logger.info("updating_product", product_id=product_id)
        existing = self._store.find_by_id(product_id)
        if existing is None:
            logger.info("product_not_found_for_update", product_id=product_id)
            return None

        merged = existing.apply(changes)
        self._evict(self.ALL_KEY)
        updated = self._store.save(merged)
        self._put(updated.id, CachedProduct.of(updated))
        logger.info("product_updated", product_id=updated.id)
        return updated

    def delete(self, product_id: str) -> bool:
        """Delete a product and evict its cache entry.

        Args:
            product_id: The product identifier

        Returns:
            True if the product existed and was deleted, False otherwise
        """
        logger.info("deleting_product", product_id=product_id)
        if not self._store.exists_by_id(product_id):
            logger.warning("product_not_found_for_deletion", product_id=product_id)
            return False

        self._evict(self.ALL_KEY)
        self._store.delete_by_id(product_id)
        self._evict(product_id)
        logger.info("product_deleted", product_id=product_id)
        return True

    def _put(self, key: str, value: CachedProduct) -> None:
        self._cache.put(key, value)
        self._metrics.record_put()

    def _evict(self, key: str) -> None:
        if self._cache.evict(key):
            self._metrics.record_eviction()

    def clear_cache(self) -> int:
        """Drop every cache entry.

        Returns:
            Number of entries removed
        """
        count = self._cache.clear()
        logger.info("cache_cleared", cache=self._cache.name, entries=count)
        return count

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache name, backend names and hit/miss counters
        """
        stats: dict = {
            "cache_name": self._cache.name,
            "cache_backend": type(self._cache).__name__,
            "store_backend": type(self._store).__name__,
        }
        stats.update(self._metrics.to_dict())
        return stats

    def is_healthy(self) -> bool:
        """Check if service is healthy.

        Returns:
            True if both store and cache are healthy
        """
        return self._store.health_check() and self._cache.health_check()

    @property
    def store(self) -> ProductStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def cache(self) -> ProductCache:
        """Get the underlying cache (for testing)."""
        return self._cache

    @property
    def metrics(self) -> CacheMetrics:
        return self._metrics
