"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

import redis
import structlog
from fastapi import Depends, FastAPI, Request

from product_catalog.config import Settings, get_redis_client, settings
from product_catalog.handlers import ProductHandler
from product_catalog.logging_config import configure_logging
from product_catalog.protocols import ProductCache, ProductStore
from product_catalog.repositories import (
    InMemoryProductCache,
    InMemoryProductRepository,
    RedisProductCache,
    RedisProductRepository,
)
from product_catalog.services import ProductService

logger = structlog.get_logger(__name__)


def get_handler(request: Request) -> ProductHandler:
    """Dependency injection for ProductHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ProductHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "product_handler", None)
    if handler is None:
        raise RuntimeError("ProductHandler not initialized. Check lifespan setup.")
    return handler


def build_store(config: Settings, client: redis.Redis | None = None) -> ProductStore:
    """Create the product store selected by STORE_BACKEND."""
    if config.store_backend == "memory":
        return InMemoryProductRepository()
    return RedisProductRepository(redis_client=client, key_prefix=config.store_key_prefix)


def build_cache(config: Settings, client: redis.Redis | None = None) -> ProductCache:
    """Create the product cache selected by CACHE_BACKEND."""
    if config.cache_backend == "memory":
        return InMemoryProductCache(name=ProductService.CACHE_NAME)
    return RedisProductCache(
        redis_client=client,
        name=ProductService.CACHE_NAME,
        namespace=config.cache_namespace,
        ttl=config.cache_ttl,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Store and cache (data access) - chosen by settings
    2. Service (business logic) - owned by the handler
    3. Handler (HTTP endpoints) - stored in app.state.product_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Removes all services from app.state on shutdown and closes the Redis client
    """
    configure_logging(settings.log_level, settings.log_json)

    uses_redis = "redis" in (settings.store_backend, settings.cache_backend)
    client = get_redis_client() if uses_redis else None

    store = build_store(settings, client)
    cache = build_cache(settings, client)

    product_service = ProductService.create(store=store, cache=cache)
    product_handler = ProductHandler(product_service=product_service)

    # Store in app.state (FastAPI pattern)
    app.state.product_handler = product_handler

    logger.info(
        "product_service_initialized",
        store_backend=settings.store_backend,
        cache_backend=settings.cache_backend,
        cache_name=cache.name,
        healthy=product_service.is_healthy(),
    )

    yield

    # Cleanup - remove from app.state
    del app.state.product_handler
    if client is not None:
        client.close()
    logger.info("product_service_shut_down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[ProductHandler, Depends(get_handler)]
