"""Repository layer for data access.

This layer abstracts external dependencies (Redis, in-process memory)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis → in-memory, etc.)
- Unit testing with spy implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from product_catalog.protocols import ProductCache, ProductStore

from .memory_cache import InMemoryProductCache
from .memory_product_repository import InMemoryProductRepository
from .redis_cache import RedisProductCache
from .redis_product_repository import RedisProductRepository

__all__ = [
    "ProductCache",
    "ProductStore",
    "InMemoryProductCache",
    "InMemoryProductRepository",
    "RedisProductCache",
    "RedisProductRepository",
]
