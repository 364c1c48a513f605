"""In-memory implementation of ProductStore.

Keeps products in a dictionary guarded by a lock. Used for tests, the demo
script, and running the API without Redis (STORE_BACKEND=memory).
"""

import threading
import uuid

from product_catalog.entities import Product


class InMemoryProductRepository:
    """Dictionary-backed product store.

    This class satisfies the ProductStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        """Initialize the repository.

        Args:
            products: Optional products to seed with (saved in order).
        """
        self._products: dict[str, Product] = {}
        self._lock = threading.RLock()

        for product in products or []:
            self.save(product)

    def find_all(self) -> list[Product]:
        with self._lock:
            return list(self._products.values())

    def find_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            return self._products.get(product_id)

    def find_by_category(self, category: str) -> list[Product]:
        with self._lock:
            return [p for p in self._products.values() if p.category == category]

    def save(self, product: Product) -> Product:
        """Insert or overwrite a product, assigning an id when missing."""
        if not product.is_persisted:
            product = product.with_id(uuid.uuid4().hex)

        with self._lock:
            self._products[product.id] = product
        return product

    def exists_by_id(self, product_id: str) -> bool:
        with self._lock:
            return product_id in self._products

    def delete_by_id(self, product_id: str) -> None:
        with self._lock:
            self._products.pop(product_id, None)

    def delete_all(self) -> None:
        with self._lock:
            self._products.clear()

    def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        """Get repository statistics."""
        with self._lock:
            total = len(self._products)
        return {"backend": "memory", "total_products": total}
