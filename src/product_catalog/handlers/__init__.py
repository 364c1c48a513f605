"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Cache / Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .product_handler import ProductHandler

__all__ = [
    "ProductHandler",
]
