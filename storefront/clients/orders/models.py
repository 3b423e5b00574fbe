"""Order read model as returned by the orders API."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class OrderStatus(str, Enum):
    """Fulfillment state, owned by the backend. UNKNOWN covers values added later."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


# The kitchen backend stores statuses in Spanish.
_STATUS_ALIASES = {
    "pendiente": OrderStatus.PENDING,
    "preparando": OrderStatus.PREPARING,
    "listo": OrderStatus.READY,
    "entregado": OrderStatus.DELIVERED,
    "cancelado": OrderStatus.CANCELLED,
}


@dataclass(frozen=True)
class FulfillmentStatus:
    """A parsed order status that keeps the raw wire value for display."""

    kind: OrderStatus
    raw: str

    @classmethod
    def parse(cls, raw: Optional[str]) -> FulfillmentStatus:
        text = raw or ""
        key = text.strip().lower()
        kind = _STATUS_ALIASES.get(key)
        if kind is None:
            try:
                kind = OrderStatus(key)
            except ValueError:
                kind = OrderStatus.UNKNOWN
        return cls(kind=kind, raw=text)


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    MOBILE_TRANSFER = "mobile-transfer"

    @classmethod
    def _missing_(cls, value: object) -> PaymentMethod:
        key = str(value).strip().lower()
        if key == "bizum":
            return cls.MOBILE_TRANSFER
        for member in cls:
            if member.value == key:
                return member
        # Anything unrecognised has always been shown as cash at the counter.
        return cls.CASH


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> PaymentStatus:
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.UNKNOWN


class LineItem(BaseModel):
    quantity: int = Field(..., gt=0)
    name: Optional[str] = None
    unit_price_cents: int

    @property
    def subtotal_cents(self) -> int:
        return self.quantity * self.unit_price_cents


class Order(BaseModel):
    """
    Read-only order projection.

    ``total_cents`` is the backend's figure and is never recomputed from
    ``items``; discounts or fees may make the two differ.
    """

    id: str
    created_at: datetime
    customer_name: str = ""
    customer_phone: str = ""
    pickup_at: Optional[datetime] = None
    status: str = ""
    payment_method: PaymentMethod = PaymentMethod.CASH
    payment_status: PaymentStatus = PaymentStatus.PENDING
    total_cents: int
    items: List[LineItem] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("customer_name", "customer_phone", "status", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("payment_method", mode="before")
    @classmethod
    def _parse_method(cls, value: Any) -> PaymentMethod:
        return PaymentMethod(value)

    @field_validator("payment_status", mode="before")
    @classmethod
    def _parse_payment_status(cls, value: Any) -> PaymentStatus:
        return PaymentStatus(value)

    @field_validator("items", mode="before")
    @classmethod
    def _none_as_no_items(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def fulfillment(self) -> FulfillmentStatus:
        return FulfillmentStatus.parse(self.status)
