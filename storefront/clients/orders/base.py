from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from storefront.clients.orders.models import Order

# Shown to customers whenever an order cannot be displayed.
ORDER_LOAD_FAILED = "No se pudo cargar el pedido"


class BaseOrdersClient(ABC):
    """Read access to single orders."""

    @abstractmethod
    async def get_order(self, order_id: str) -> Optional[Order]:
        """Fetch one order.

        Returns ``None`` when the backend answers without a usable order.
        Raises ``OrderLoadError`` on transport errors, non-2xx answers and
        undecodable bodies.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None
