"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Cache / Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from product_catalog.services import ProductService

    service = ProductService.create(store=InMemoryProductRepository())
    service = ProductService(store=store, cache=RedisProductCache.create())
    ```
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
