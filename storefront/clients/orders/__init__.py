"""
Orders API client: models, base contract and the httpx implementation.
"""
from storefront.clients.orders.base import ORDER_LOAD_FAILED, BaseOrdersClient
from storefront.clients.orders.http import HttpOrdersClient, parse_order_payload
from storefront.clients.orders.models import (
    FulfillmentStatus,
    LineItem,
    Order,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)

__all__ = [
    "ORDER_LOAD_FAILED",
    "BaseOrdersClient",
    "HttpOrdersClient",
    "parse_order_payload",
    "FulfillmentStatus",
    "LineItem",
    "Order",
    "OrderStatus",
    "PaymentMethod",
    "PaymentStatus",
]
