"""
Order detail view: resolve the identifier, load the order, hold the result.

The view moves through three states (loading, loaded, error). Each load is
tagged with a generation number; a result is applied only while the view is
active and no newer load or deactivation happened in the meantime.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Mapping, Optional

from storefront.clients.orders.base import ORDER_LOAD_FAILED, BaseOrdersClient
from storefront.clients.orders.models import Order
from storefront.core.exceptions import StorefrontError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Error desconocido"


class ViewPhase(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class OrderViewState:
    phase: ViewPhase = ViewPhase.LOADING
    order: Optional[Order] = None
    error: Optional[str] = None


class OrderDetailView:
    """Holds at most one order, for the identifier it was last pointed at."""

    def __init__(self, client: BaseOrdersClient) -> None:
        self._client = client
        self._state = OrderViewState()
        self._identifier = ""
        self._generation = 0
        self._active = False

    @property
    def state(self) -> OrderViewState:
        return self._state

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def active(self) -> bool:
        return self._active

    async def activate(self, params: Awaitable[Mapping[str, Any]]) -> OrderViewState:
        """Await the route params, then load the order they name.

        An empty or unresolvable identifier leaves the view loading and
        issues no request.
        """
        self._active = True
        self._generation += 1
        generation = self._generation

        identifier = await _resolve_identifier(params)
        if not self._is_current(generation):
            logger.debug("View deactivated before identifier %r resolved", identifier)
            return self._state
        return await self.change_identifier(identifier)

    async def change_identifier(self, identifier: str) -> OrderViewState:
        """Point the view at another order; supersedes any load in flight."""
        if not self._active:
            return self._state
        self._generation += 1
        generation = self._generation
        self._identifier = identifier
        self._state = OrderViewState()
        if not identifier:
            return self._state
        await self._load(identifier, generation)
        return self._state

    def deactivate(self) -> None:
        """Stop accepting results; pending loads finish into the void."""
        self._active = False
        self._generation += 1

    async def _load(self, identifier: str, generation: int) -> None:
        try:
            order = await self._client.get_order(identifier)
        except StorefrontError as exc:
            logger.warning(
                "Could not load order %s: %s", identifier, exc.to_dict()
            )
            self._apply(generation, OrderViewState(phase=ViewPhase.ERROR, error=exc.message))
            return
        except Exception:
            logger.exception("Unexpected failure loading order %s", identifier)
            self._apply(generation, OrderViewState(phase=ViewPhase.ERROR, error=UNKNOWN_ERROR))
            return

        if order is None:
            logger.info("Order %s not returned by the orders API", identifier)
            self._apply(generation, OrderViewState(phase=ViewPhase.ERROR, error=ORDER_LOAD_FAILED))
            return
        if self._apply(generation, OrderViewState(phase=ViewPhase.LOADED, order=order)):
            logger.info("Loaded order %s", identifier)

    def _apply(self, generation: int, state: OrderViewState) -> bool:
        if not self._is_current(generation):
            logger.debug("Discarding stale %s result (generation %d)", state.phase.value, generation)
            return False
        self._state = state
        return True

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation


async def _resolve_identifier(params: Awaitable[Mapping[str, Any]]) -> str:
    try:
        resolved = await params
    except Exception:
        logger.warning("Could not resolve order identifier", exc_info=True)
        return ""
    value = resolved.get("id") if resolved else None
    return "" if value is None else str(value)
