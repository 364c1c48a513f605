"""HTTP handlers for product operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from fastapi import HTTPException, status

from product_catalog.dto import (
    CacheStatsResponse,
    HealthCheckResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from product_catalog.entities import Product
from product_catalog.exceptions import ProductCatalogError
from product_catalog.services import ProductService

logger = structlog.get_logger(__name__)


def _not_found(product_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product {product_id} not found",
    )


def _to_list(products: list[Product]) -> ProductListResponse:
    return ProductListResponse(
        count=len(products),
        products=[ProductResponse.from_entity(p) for p in products],
    )


class ProductHandler:
    """HTTP handlers for product operations.

    This handler delegates business logic to ProductService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping missing products to 404
    - Mapping unavailable backends to 503
    """

    def __init__(self, product_service: ProductService) -> None:
        """Initialize the product handler.

        Args:
            product_service: The product service for business logic (required).
        """
        self._service = product_service

    @contextmanager
    def _errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except ProductCatalogError as e:
            logger.error("backend_unavailable", action=action, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Failed to {action}: {e}",
            ) from e
        except Exception as e:
            logger.exception("request_failed", action=action)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to {action}: {e}",
            ) from e

    def list_products(self) -> ProductListResponse:
        """Handle GET /products requests."""
        with self._errors("list products"):
            products = self._service.list_all()
        return _to_list(products)

    def get_product(self, product_id: str) -> ProductResponse:
        """Handle GET /products/{product_id} requests.

        Raises:
            HTTPException: 404 if the product does not exist
        """
        with self._errors("get product"):
            product = self._service.get_by_id(product_id)
        if product is None:
            raise _not_found(product_id)
        return ProductResponse.from_entity(product)

    def get_products_by_category(self, category: str) -> ProductListResponse:
        """Handle GET /products/category/{category} requests."""
        with self._errors("get products by category"):
            products = self._service.get_by_category(category)
        return _to_list(products)

    def create_product(self, request: ProductCreateRequest) -> ProductResponse:
        """Handle POST /products requests."""
        with self._errors("create product"):
            product = self._service.create(request.to_entity())
        return ProductResponse.from_entity(product)

    def update_product(self, product_id: str, request: ProductUpdateRequest) -> ProductResponse:
        """Handle PUT /products/{product_id} requests.

        Raises:
            HTTPException: 404 if the product does not exist
        """
        with self._errors("update product"):
            product = self._service.update(product_id, request.to_changes())
        if product is None:
            raise _not_found(product_id)
        return ProductResponse.from_entity(product)

    def delete_product(self, product_id: str) -> None:
        """Handle DELETE /products/{product_id} requests.

        Raises:
            HTTPException: 404 if the product does not exist
        """
        with self._errors("delete product"):
            deleted = self._service.delete(product_id)
        if not deleted:
            raise _not_found(product_id)

    def get_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests."""
        return CacheStatsResponse(**self._service.get_stats())

    def clear_cache(self) -> dict:
        """Handle DELETE /cache requests."""
        with self._errors("clear cache"):
            count = self._service.clear_cache()

        return {
            "success": True,
            "deleted_count": count,
            "message": "Cache cleared successfully",
        }

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the store or the cache is unreachable
        """
        store_healthy = self._service.store.health_check()
        cache_healthy = self._service.cache.health_check()

        if not (store_healthy and cache_healthy):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail={
                    "status": "unhealthy",
                    "store_healthy": store_healthy,
                    "cache_healthy": cache_healthy,
                },
            )

        return HealthCheckResponse(status="healthy", store_healthy=True, cache_healthy=True)
