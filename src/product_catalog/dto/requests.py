"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from product_catalog.entities import Product, ProductChanges


class ProductCreateRequest(BaseModel):
    """Request DTO for creating a product.

    The handler will convert this to a Product entity for the service layer.
    """

    name: str = Field(..., description="Display name", min_length=1)
    price: float = Field(..., description="Price (non-negative)", ge=0.0)
    category: str = Field(..., description="Category used for grouped lookups", min_length=1)

    def to_entity(self) -> Product:
        return Product(name=self.name, price=self.price, category=self.category)


class ProductUpdateRequest(BaseModel):
    """Request DTO for a partial product update. Omitted fields are kept."""

    name: str | None = Field(None, description="New display name", min_length=1)
    price: float | None = Field(None, description="New price (non-negative)", ge=0.0)
    category: str | None = Field(None, description="New category", min_length=1)

    def to_changes(self) -> ProductChanges:
        return ProductChanges(name=self.name, price=self.price, category=self.category)
