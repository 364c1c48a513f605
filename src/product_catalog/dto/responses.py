"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from product_catalog.entities import Product


class ProductResponse(BaseModel):
    """Single product."""

    id: str = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Display name")
    price: float = Field(..., description="Price")
    category: str = Field(..., description="Category")

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, price=product.price, category=product.category)


class ProductListResponse(BaseModel):
    """A list of products (all products or one category)."""

    count: int = Field(..., description="Number of products returned", ge=0)
    products: list[ProductResponse] = Field(default_factory=list)


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    cache_name: str = Field(..., description="Name of the product cache")
    cache_backend: str = Field(..., description="Cache implementation in use")
    store_backend: str = Field(..., description="Store implementation in use")
    lookups: int = Field(..., description="Point lookups served", ge=0)
    hits: int = Field(..., description="Lookups answered from the cache", ge=0)
    misses: int = Field(..., description="Lookups that read the store", ge=0)
    puts: int = Field(..., description="Cache writes", ge=0)
    evictions: int = Field(..., description="Cache entries removed by mutations", ge=0)
    hit_rate: float = Field(..., description="hits / lookups", ge=0.0, le=1.0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the product store is reachable")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
