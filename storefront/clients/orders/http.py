"""httpx implementation of the orders read client."""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from storefront.clients.orders.base import ORDER_LOAD_FAILED, BaseOrdersClient
from storefront.clients.orders.models import Order
from storefront.config.orders_api import OrdersApiConfig
from storefront.core.exceptions import OrderLoadError

logger = logging.getLogger(__name__)


def parse_order_payload(body: Any) -> Optional[Order]:
    """Extract the ``order`` field of an API body; malformed or missing -> None."""
    if not isinstance(body, dict):
        logger.warning("Orders API body is not an object (%s)", type(body).__name__)
        return None
    raw = body.get("order")
    if raw is None:
        return None
    try:
        return Order.model_validate(raw)
    except PydanticValidationError as exc:
        logger.warning("Orders API returned a malformed order: %s", exc.errors(include_url=False))
        return None


class HttpOrdersClient(BaseOrdersClient):
    """Calls ``GET {base_url}{path}?id=...`` once per request, never cached."""

    def __init__(
        self,
        config: OrdersApiConfig,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
        )

    async def get_order(self, order_id: str) -> Optional[Order]:
        try:
            response = await self._client.get(
                self._config.path,
                params={"id": order_id},
                headers={"Cache-Control": "no-store"},
            )
        except httpx.HTTPError as exc:
            raise OrderLoadError(
                ORDER_LOAD_FAILED,
                details={"order_id": order_id},
                cause=exc,
            ) from exc

        if not response.is_success:
            # Error bodies are not parsed; the customer always sees the generic message.
            raise OrderLoadError(
                ORDER_LOAD_FAILED,
                details={"order_id": order_id, "status_code": response.status_code},
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise OrderLoadError(
                ORDER_LOAD_FAILED,
                details={"order_id": order_id, "status_code": response.status_code},
                cause=exc,
            ) from exc

        order = parse_order_payload(body)
        logger.debug("Fetched order %s (found=%s)", order_id, order is not None)
        return order

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
