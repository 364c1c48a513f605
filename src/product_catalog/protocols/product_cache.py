"""Product cache protocol.

Defines the interface for the named cache sitting in front of the store.
Keys are strings (product ids, plus the aggregate key "all"); values are
CachedProduct entries so a remembered miss is distinguishable from a key
that was never cached.
"""

from typing import Protocol, runtime_checkable

from product_catalog.entities import CachedProduct


@runtime_checkable
class ProductCache(Protocol):
    """Protocol for product cache backends.

    Implementations must be safe to call from concurrent worker threads.
    """

    @property
    def name(self) -> str:
        """Cache name used for namespacing when infrastructure is shared."""
        ...

    def get(self, key: str) -> CachedProduct | None:
        """Look up a cache entry.

        Args:
            key: Cache key

        Returns:
            The entry (possibly an absent marker), or None if not cached
        """
        ...

    def put(self, key: str, value: CachedProduct) -> None:
        """Store or replace a cache entry."""
        ...

    def evict(self, key: str) -> bool:
        """Remove a cache entry.

        Returns:
            True if an entry was removed, False if the key was not cached
        """
        ...

    def clear(self) -> int:
        """Remove every entry of this cache.

        Returns:
            Number of entries removed
        """
        ...

    def health_check(self) -> bool:
        """Check if the cache backend is accessible."""
        ...
