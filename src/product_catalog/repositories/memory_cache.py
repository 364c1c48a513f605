"""In-memory implementation of ProductCache."""

import threading

from product_catalog.entities import CachedProduct


class InMemoryProductCache:
    """Lock-guarded dictionary cache.

    Satisfies the ProductCache protocol. Entries never expire; they leave
    the cache only through evict() or clear().
    """

    def __init__(self, name: str = "products") -> None:
        self._name = name
        self._entries: dict[str, CachedProduct] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str) -> CachedProduct | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: CachedProduct) -> None:
        with self._lock:
            self._entries[key] = value

    def evict(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def health_check(self) -> bool:
        return True

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
