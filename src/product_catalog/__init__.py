"""Product Catalog - Product CRUD with read-through caching.

This package provides a layered architecture for a product catalog whose
single-product lookups are cached:

Layers:
    - protocols: Interface contracts (ProductStore, ProductCache)
    - repositories: Data access implementations (Redis, in-memory)
    - services: Business logic (cache coordination)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from product_catalog import InMemoryProductRepository, Product, ProductService

    service = ProductService.create(store=InMemoryProductRepository())
    chair = service.create(Product(name="Chair", price=80.0, category="Furniture"))
    service.get_by_id(chair.id)
    ```

For HTTP API:
    ```python
    from product_catalog.api.app import app
    ```
"""

from product_catalog.config import get_redis_client, settings
from product_catalog.dto import ProductCreateRequest, ProductUpdateRequest
from product_catalog.entities import CachedProduct, Product, ProductChanges
from product_catalog.exceptions import CacheUnavailableError, ProductCatalogError, StoreUnavailableError
from product_catalog.handlers import ProductHandler
from product_catalog.protocols import ProductCache, ProductStore
from product_catalog.repositories import (
    InMemoryProductCache,
    InMemoryProductRepository,
    RedisProductCache,
    RedisProductRepository,
)
from product_catalog.services import ProductService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "ProductStore",
    "ProductCache",
    # Services (business logic)
    "ProductService",
    # Handlers (HTTP)
    "ProductHandler",
    # Repositories (data access)
    "InMemoryProductRepository",
    "InMemoryProductCache",
    "RedisProductRepository",
    "RedisProductCache",
    # Entities (domain models)
    "Product",
    "ProductChanges",
    "CachedProduct",
    # DTOs (API contracts)
    "ProductCreateRequest",
    "ProductUpdateRequest",
    # Errors
    "ProductCatalogError",
    "StoreUnavailableError",
    "CacheUnavailableError",
]
