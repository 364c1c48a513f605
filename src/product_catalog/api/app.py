from typing import Any

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from product_catalog.api.dependencies import HandlerDep, lifespan
from product_catalog.config import settings
from product_catalog.dto import (
    CacheStatsResponse,
    HealthCheckResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)

app = FastAPI(
    title="Product Catalog API",
    description="Product CRUD service with read-through caching on single-product lookups",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes are plain ``def`` so FastAPI runs them on its worker threadpool;
# store and cache calls are blocking.


@app.get("/")
def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Product Catalog API",
        "version": "0.1.0",
        "description": "Product CRUD service with read-through caching on single-product lookups",
        "endpoints": {
            "products": "/products",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return handler.health_check()


@app.get("/products", response_model=ProductListResponse)
def list_products(handler: HandlerDep) -> ProductListResponse:
    """List every product (never cached)."""
    return handler.list_products()


@app.get("/products/category/{category}", response_model=ProductListResponse)
def get_products_by_category(category: str, handler: HandlerDep) -> ProductListResponse:
    """List the products of one category (never cached)."""
    return handler.get_products_by_category(category)


@app.get("/products/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, handler: HandlerDep) -> ProductResponse:
    """Get one product, served from the cache when possible."""
    return handler.get_product(product_id)


@app.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(request: ProductCreateRequest, handler: HandlerDep) -> ProductResponse:
    """Create a product. The store assigns its id."""
    return handler.create_product(request)


@app.put("/products/{product_id}", response_model=ProductResponse)
def update_product(product_id: str, request: ProductUpdateRequest, handler: HandlerDep) -> ProductResponse:
    """Update some fields of a product and refresh its cache entry."""
    return handler.update_product(product_id, request)


@app.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: str, handler: HandlerDep) -> None:
    """Delete a product and evict its cache entry."""
    handler.delete_product(product_id)


@app.get("/stats", response_model=CacheStatsResponse)
def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get cache statistics."""
    return handler.get_stats()


@app.delete("/cache", response_model=dict[str, Any])
def clear_cache(handler: HandlerDep) -> dict[str, Any]:
    """Clear all entries from the product cache."""
    return handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_catalog.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
