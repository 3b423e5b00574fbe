"""FastAPI dependency providers."""
from __future__ import annotations

from fastapi import HTTPException, Request, status

from storefront.clients.orders.base import BaseOrdersClient
from storefront.views.renderer import OrderPageRenderer


def get_orders_client(request: Request) -> BaseOrdersClient:
    """Return the orders client built at startup."""
    client = getattr(request.app.state, "orders_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Orders client not initialised. Check server startup logs.",
        )
    return client


def get_renderer(request: Request) -> OrderPageRenderer:
    renderer = getattr(request.app.state, "renderer", None)
    if renderer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Page renderer not initialised. Check server startup logs.",
        )
    return renderer
