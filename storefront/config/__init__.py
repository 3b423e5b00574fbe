"""
Storefront config: load from env.

Load from env: load_orders_api_config(), load_view_config().
"""
from storefront.config.orders_api import OrdersApiConfig, load_orders_api_config
from storefront.config.view import OrderViewConfig, load_view_config

__all__ = [
    "OrdersApiConfig",
    "load_orders_api_config",
    "OrderViewConfig",
    "load_view_config",
]
