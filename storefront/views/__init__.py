"""Order detail page: view state, presenters, formatting and HTML rendering."""
from storefront.views.formatting import OrderFormatter
from storefront.views.order_detail import OrderDetailView, OrderViewState, ViewPhase
from storefront.views.presenters import build_detail_context, is_paid_flag, select_banner
from storefront.views.renderer import OrderPageRenderer

__all__ = [
    "OrderFormatter",
    "OrderDetailView",
    "OrderViewState",
    "ViewPhase",
    "OrderPageRenderer",
    "build_detail_context",
    "is_paid_flag",
    "select_banner",
]
