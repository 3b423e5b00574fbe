"""
Pure display logic for the order detail page.

Everything here is a function of an Order and the paid flag; nothing reads
global state, so the page can be checked without a browser or a backend.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from urllib.parse import quote

from storefront.clients.orders.models import (
    FulfillmentStatus,
    LineItem,
    Order,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)
from storefront.views.formatting import OrderFormatter

ITEM_NAME_FALLBACK = "Producto"


class BannerKind(str, Enum):
    SUCCESS = "success"
    PENDING = "pending"
    FAILURE = "failure"


@dataclass(frozen=True)
class Banner:
    kind: BannerKind
    message: str
    css_class: str


_BANNERS = {
    BannerKind.SUCCESS: Banner(
        BannerKind.SUCCESS,
        "¡Pago completado correctamente! Estamos procesando tu pedido.",
        "bg-green-100 text-green-700",
    ),
    BannerKind.PENDING: Banner(
        BannerKind.PENDING,
        "Tu pedido se ha creado. El pago aparece pendiente.",
        "bg-yellow-100 text-yellow-700",
    ),
    BannerKind.FAILURE: Banner(
        BannerKind.FAILURE,
        "El pago ha fallado. Si el cargo no aparece en tu extracto, inténtalo de nuevo.",
        "bg-red-100 text-red-700",
    ),
}


def is_paid_flag(raw: Optional[str]) -> bool:
    """The payment provider redirects back with ``?paid=1``; nothing else counts."""
    return raw == "1"


def select_banner(paid_flag: bool, payment_status: PaymentStatus) -> Optional[Banner]:
    """First match wins: paid flag or paid, then pending, then failed."""
    if paid_flag or payment_status is PaymentStatus.PAID:
        return _BANNERS[BannerKind.SUCCESS]
    if payment_status is PaymentStatus.PENDING:
        return _BANNERS[BannerKind.PENDING]
    if payment_status is PaymentStatus.FAILED:
        return _BANNERS[BannerKind.FAILURE]
    return None


_METHOD_LABELS = {
    PaymentMethod.CASH: "Efectivo",
    PaymentMethod.CARD: "Tarjeta",
    PaymentMethod.MOBILE_TRANSFER: "Bizum",
}

# (label, css) per payment status; unknown values look pending.
_PAYMENT_STATUS_STYLES = {
    PaymentStatus.PAID: ("Pagado", "bg-green-100 text-green-700"),
    PaymentStatus.FAILED: ("Fallido", "bg-red-100 text-red-700"),
    PaymentStatus.REFUNDED: ("Reembolsado", "bg-purple-100 text-purple-700"),
    PaymentStatus.PENDING: ("Pendiente", "bg-yellow-100 text-yellow-700"),
    PaymentStatus.UNKNOWN: ("Pendiente", "bg-yellow-100 text-yellow-700"),
}


@dataclass(frozen=True)
class PaymentBadge:
    status_label: str
    method_label: str
    css_class: str

    @property
    def text(self) -> str:
        return f"{self.status_label} · {self.method_label}"


def payment_badge(method: PaymentMethod, status: PaymentStatus) -> PaymentBadge:
    label, css = _PAYMENT_STATUS_STYLES[status]
    return PaymentBadge(status_label=label, method_label=_METHOD_LABELS[method], css_class=css)


_ORDER_STATUS_LABELS = {
    OrderStatus.PENDING: "Pendiente",
    OrderStatus.PREPARING: "Preparando",
    OrderStatus.READY: "Listo",
    OrderStatus.DELIVERED: "Entregado",
    OrderStatus.CANCELLED: "Cancelado",
}


def order_status_label(status: FulfillmentStatus) -> str:
    if status.kind is OrderStatus.UNKNOWN:
        return status.raw
    return _ORDER_STATUS_LABELS[status.kind]


@dataclass(frozen=True)
class LineRow:
    name: str
    quantity: str
    subtotal: str


def line_rows(items: List[LineItem], formatter: OrderFormatter) -> List[LineRow]:
    return [
        LineRow(
            name=item.name if item.name is not None else ITEM_NAME_FALLBACK,
            quantity=f"x{item.quantity}",
            subtotal=formatter.money(item.subtotal_cents),
        )
        for item in items
    ]


@dataclass(frozen=True)
class OrderDetailContext:
    """Everything the detail template prints, already formatted."""

    order_id: str
    print_url: str
    banner: Optional[Banner]
    customer_name: str
    customer_phone: str
    created: str
    pickup: str
    status_label: str
    badge: PaymentBadge
    rows: List[LineRow]
    # Backend total, not the sum of rows.
    total: str


def build_detail_context(
    order: Order,
    paid_flag: bool,
    formatter: OrderFormatter,
) -> OrderDetailContext:
    return OrderDetailContext(
        order_id=order.id,
        print_url=f"/order/{quote(order.id, safe='')}/print",
        banner=select_banner(paid_flag, order.payment_status),
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        created=formatter.moment(order.created_at),
        pickup=formatter.optional_moment(order.pickup_at),
        status_label=order_status_label(order.fulfillment),
        badge=payment_badge(order.payment_method, order.payment_status),
        rows=line_rows(order.items, formatter),
        total=formatter.money(order.total_cents),
    )
