"""Render an OrderViewState to HTML with the Jinja2 templates next to this module."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from storefront.clients.orders.base import ORDER_LOAD_FAILED
from storefront.views.formatting import OrderFormatter
from storefront.views.order_detail import OrderViewState, ViewPhase
from storefront.views.presenters import build_detail_context

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def build_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "xml"]),
    )


class OrderPageRenderer:
    """Exactly one of loading, error or detail is rendered for a given state."""

    def __init__(
        self,
        formatter: OrderFormatter,
        env: Optional[Environment] = None,
    ) -> None:
        self._formatter = formatter
        self._env = env or build_environment()

    def render(self, state: OrderViewState, *, paid_flag: bool = False) -> str:
        if state.phase is ViewPhase.LOADING:
            return self._env.get_template("order_loading.html").render()
        if state.phase is ViewPhase.ERROR or state.order is None:
            return self._env.get_template("order_error.html").render(
                message=state.error or ORDER_LOAD_FAILED,
            )
        page = build_detail_context(state.order, paid_flag, self._formatter)
        return self._env.get_template("order_detail.html").render(page=page)
