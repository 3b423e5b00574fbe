"""Storefront web application: entry point.

Start with:
    uvicorn storefront.api.main:app --reload --host 0.0.0.0 --port 8000

The orders read API is reached at ORDERS_API_BASE_URL; locale, currency and
timezone for the page come from ORDER_VIEW_* (see storefront.config).
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from storefront.clients.orders.http import HttpOrdersClient
from storefront.config import load_orders_api_config, load_view_config
from storefront.core.exceptions import StorefrontError
from storefront.core.logger import configure as configure_logging
from storefront.views.formatting import OrderFormatter
from storefront.views.renderer import OrderPageRenderer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ──────────────────────────────────────────────────
    configure_logging()

    api_config = load_orders_api_config()
    view_config = load_view_config()

    orders_client = HttpOrdersClient(api_config)
    app.state.orders_client = orders_client
    app.state.renderer = OrderPageRenderer(OrderFormatter(view_config))
    logger.info(
        "API: orders client ready (%s%s, timeout=%s), rendering %s/%s/%s",
        api_config.base_url,
        api_config.path,
        api_config.timeout,
        view_config.locale,
        view_config.currency,
        view_config.timezone,
    )

    yield

    # ── Shutdown ─────────────────────────────────────────────────
    await orders_client.aclose()
    logger.info("API: orders client closed")


app = FastAPI(
    title="Storefront",
    version="1.0.0",
    description="Customer-facing order pages for the food-ordering shop.",
    lifespan=lifespan,
)

# Rate limiter; limit is configurable via ORDER_PAGE_RATE_LIMIT env var (default 60/minute)
_page_rate_limit = os.environ.get("ORDER_PAGE_RATE_LIMIT", "60/minute")
limiter = Limiter(key_func=get_remote_address, default_limits=[_page_rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    logger.error("Unhandled %s on %s: %s", exc.code, request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content={"error": exc.to_dict()})


# ── Routers ───────────────────────────────────────────────────────
from storefront.api.routers import orders  # noqa: E402

app.include_router(orders.router)


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
