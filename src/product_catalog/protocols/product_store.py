"""Product store protocol.

Defines the interface for any persistence backend holding products.

Implementations can include:
- Redis hashes (default)
- In-memory dictionary (tests, demos)
- MongoDB, PostgreSQL, or any other document/row store
"""

from typing import Protocol, runtime_checkable

from product_catalog.entities import Product


@runtime_checkable
class ProductStore(Protocol):
    """Protocol for product persistence backends.

    Each call is atomic on its own; no ordering or transactional guarantees
    span multiple calls.

    Example:
        ```python
        from product_catalog.protocols import ProductStore

        store: ProductStore = RedisProductRepository.create()
        store: ProductStore = InMemoryProductRepository()
        ```
    """

    def find_all(self) -> list[Product]:
        """Return every persisted product."""
        ...

    def find_by_id(self, product_id: str) -> Product | None:
        """Look up a product by identifier.

        Args:
            product_id: The product identifier

        Returns:
            The product, or None if it does not exist
        """
        ...

    def find_by_category(self, category: str) -> list[Product]:
        """Return all products in a category (possibly empty).

        Args:
            category: Exact category name
        """
        ...

    def save(self, product: Product) -> Product:
        """Insert or overwrite a product.

        Args:
            product: Product to persist. If it has no id, one is assigned;
                otherwise the record with that id is overwritten.

        Returns:
            The persisted product, always carrying an id
        """
        ...

    def exists_by_id(self, product_id: str) -> bool:
        """Check whether a product with this id exists."""
        ...

    def delete_by_id(self, product_id: str) -> None:
        """Delete a product. Deleting a missing id does nothing."""
        ...

    def delete_all(self) -> None:
        """Delete every product."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
