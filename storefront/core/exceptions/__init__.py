"""
Storefront exception system.

Usage:
    from storefront.core.exceptions import StorefrontError, OrderLoadError, exception_factory

    # Built-in types
    raise OrderLoadError("No se pudo cargar el pedido", details={"status_code": 500})

    # Add new type on demand
    PrintError = exception_factory("PrintError", code="PRINT_ERROR", http_status=502)
    raise PrintError("Ticket printer unreachable", cause=original_error)
"""
from storefront.core.exceptions.base import StorefrontError, exception_factory
from storefront.core.exceptions.errors import (
    ConfigurationError,
    ExternalServiceError,
    OrderLoadError,
)

__all__ = [
    "StorefrontError",
    "exception_factory",
    "ConfigurationError",
    "ExternalServiceError",
    "OrderLoadError",
]
