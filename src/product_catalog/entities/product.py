"""Product domain entity."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Product:
    """Domain entity for a catalog product.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        name: Display name
        price: Non-negative price
        category: Category used for grouped lookups (not unique)
        id: Identifier assigned by the store on first save, None before that
    """

    name: str
    price: float
    category: str
    id: str | None = None

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned an identifier."""
        return bool(self.id)

    def with_id(self, product_id: str) -> "Product":
        """Return a copy carrying the given identifier."""
        return replace(self, id=product_id)

    def apply(self, changes: "ProductChanges") -> "Product":
        """Return a copy with the non-empty fields of ``changes`` applied.

        The identifier is never touched.
        """
        return replace(
            self,
            name=self.name if changes.name is None else changes.name,
            price=self.price if changes.price is None else changes.price,
            category=self.category if changes.category is None else changes.category,
        )


@dataclass(frozen=True)
class ProductChanges:
    """Partial update for a product. Fields left as None keep their value."""

    name: str | None = None
    price: float | None = None
    category: str | None = None
