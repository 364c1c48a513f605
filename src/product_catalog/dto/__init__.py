"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import ProductCreateRequest, ProductUpdateRequest
from .responses import (
    CacheStatsResponse,
    HealthCheckResponse,
    ProductListResponse,
    ProductResponse,
)

__all__ = [
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductResponse",
    "ProductListResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
