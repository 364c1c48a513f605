"""Exceptions raised by product catalog collaborators.

A missing product is never an exception: services report it as ``None``
or ``False``. These exceptions cover backends that cannot complete a call.
"""


class ProductCatalogError(Exception):
    """Base class for product catalog errors."""


class StoreUnavailableError(ProductCatalogError):
    """The product store could not complete a call."""


class CacheUnavailableError(ProductCatalogError):
    """The product cache backend could not complete a call."""
