"""Order detail page: GET /order/{order_id}[?paid=1]."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from storefront.api.dependencies import get_orders_client, get_renderer
from storefront.clients.orders.base import BaseOrdersClient
from storefront.core.exceptions import OrderLoadError
from storefront.views.order_detail import OrderDetailView, ViewPhase
from storefront.views.presenters import is_paid_flag
from storefront.views.renderer import OrderPageRenderer

logger = logging.getLogger(__name__)
router = APIRouter(tags=["orders"])


async def _route_params(request: Request) -> Dict[str, Any]:
    """Route params in the shape the view expects: ``{"id": ...}``."""
    return {"id": request.path_params.get("order_id")}


@router.get("/order/{order_id}", response_class=HTMLResponse)
async def order_detail(
    request: Request,
    order_id: str,
    paid: Optional[str] = None,
    client: BaseOrdersClient = Depends(get_orders_client),
    renderer: OrderPageRenderer = Depends(get_renderer),
):
    """Render one order. ``?paid=1`` shows the payment success banner."""
    view = OrderDetailView(client)
    try:
        state = await view.activate(_route_params(request))
    finally:
        view.deactivate()

    html = renderer.render(state, paid_flag=is_paid_flag(paid))
    status_code = OrderLoadError.default_http_status if state.phase is ViewPhase.ERROR else 200
    if status_code != 200:
        logger.info("Order page %s rendered with error: %s", order_id, state.error)
    return HTMLResponse(html, status_code=status_code)
