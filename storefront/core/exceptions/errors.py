"""
Built-in exception types. Add new ones here or via exception_factory().
"""
from __future__ import annotations

from storefront.core.exceptions.base import StorefrontError


class ConfigurationError(StorefrontError):
    """Invalid or missing configuration."""

    default_code = "CONFIGURATION_ERROR"
    default_http_status = 500


class ExternalServiceError(StorefrontError):
    """An upstream service (orders API) failed or answered garbage."""

    default_code = "EXTERNAL_SERVICE_ERROR"
    default_http_status = 502


class OrderLoadError(ExternalServiceError):
    """The order could not be fetched or decoded."""

    default_code = "ORDER_LOAD_ERROR"
    default_http_status = 502
