"""Cached product value."""

from dataclasses import dataclass

from .product import Product


@dataclass(frozen=True)
class CachedProduct:
    """A cache entry: either a product snapshot or an explicit absent marker.

    Cache lookups return ``CachedProduct | None``. ``None`` means the id has
    not been cached yet; ``CachedProduct.absent()`` means the store was asked
    and had no such product.

    Attributes:
        product: The cached snapshot, or None for a remembered miss
    """

    product: Product | None = None

    @classmethod
    def of(cls, product: Product | None) -> "CachedProduct":
        """Wrap a store lookup outcome."""
        return cls(product=product)

    @classmethod
    def absent(cls) -> "CachedProduct":
        """Marker for a product known not to exist."""
        return cls(product=None)

    @property
    def is_absent(self) -> bool:
        return self.product is None
