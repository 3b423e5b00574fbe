"""
storefront.config.orders_api – where and how to reach the orders read API.

Env vars: ORDERS_API_BASE_URL, ORDERS_API_PATH, ORDERS_API_TIMEOUT.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from storefront.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class OrdersApiConfig:
    """
    Orders API location and request policy.

    All fields are validated on construction. Use load_orders_api_config()
    to build from environment variables.
    """

    base_url: str = "http://localhost:3000"
    """Scheme + host of the service exposing the orders read endpoint."""

    path: str = "/api/orders/get"
    """Endpoint path; the order id is sent as the ``id`` query parameter."""

    timeout: Optional[float] = None
    """Seconds before a request is abandoned. None = wait indefinitely."""

    def __post_init__(self) -> None:
        url = (self.base_url or "").strip()
        if not (url.startswith("http://") or url.startswith("https://")):
            raise ValueError("ORDERS_API_BASE_URL must start with http:// or https://")
        if not self.path or not self.path.startswith("/"):
            raise ValueError(f"path must start with '/', got {self.path!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive or None, got {self.timeout!r}")

    @classmethod
    def from_env(cls, **overrides: object) -> OrdersApiConfig:
        """
        Build config from environment variables.

        Env:
            ORDERS_API_BASE_URL  – default http://localhost:3000
            ORDERS_API_PATH      – default /api/orders/get
            ORDERS_API_TIMEOUT   – seconds; empty means no timeout

        Overrides (keyword args) take precedence over env.
        """
        base_url = overrides.get("base_url") or os.environ.get(
            "ORDERS_API_BASE_URL", "http://localhost:3000"
        )
        path = overrides.get("path") or os.environ.get("ORDERS_API_PATH", "/api/orders/get")
        if "timeout" in overrides:
            timeout = overrides["timeout"]
        else:
            raw = os.environ.get("ORDERS_API_TIMEOUT", "").strip()
            timeout = float(raw) if raw else None
        return cls(
            base_url=str(base_url).strip().rstrip("/"),
            path=str(path).strip(),
            timeout=float(timeout) if timeout is not None else None,
        )


def load_orders_api_config(**overrides: object) -> OrdersApiConfig:
    """
    Load and validate the orders API config from environment.

    Raises:
        ConfigurationError: when a value is missing or invalid.
    """
    try:
        return OrdersApiConfig.from_env(**overrides)
    except ValueError as exc:
        raise ConfigurationError(str(exc), cause=exc) from exc
