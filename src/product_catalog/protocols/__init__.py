"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, etc.)
- Unit testing with spy implementations
- Clear separation of concerns
"""

from .product_cache import ProductCache
from .product_store import ProductStore

__all__ = [
    "ProductCache",
    "ProductStore",
]
