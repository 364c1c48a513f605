"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cached_product import CachedProduct
from .product import Product, ProductChanges

__all__ = ["CachedProduct", "Product", "ProductChanges"]
