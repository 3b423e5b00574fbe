"""Tests for parsing orders as the backend sends them."""
import pytest
from pydantic import ValidationError

from storefront.clients.orders.models import (
    FulfillmentStatus,
    Order,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)

BASE = {
    "id": "A12",
    "created_at": "2024-05-01T10:30:00Z",
    "customer_name": "Lucía",
    "customer_phone": "600123123",
    "pickup_at": None,
    "status": "pendiente",
    "payment_method": "BIZUM",
    "payment_status": "pending",
    "total_cents": 900,
    "items": [{"quantity": 1, "unit_price_cents": 900}],
}


def _parse(**overrides) -> Order:
    return Order.model_validate({**BASE, **overrides})


class TestFulfillmentStatus:
    @pytest.mark.parametrize(
        "raw, kind",
        [
            ("pendiente", OrderStatus.PENDING),
            ("preparando", OrderStatus.PREPARING),
            ("listo", OrderStatus.READY),
            ("entregado", OrderStatus.DELIVERED),
            ("cancelado", OrderStatus.CANCELLED),
            ("Delivered", OrderStatus.DELIVERED),
        ],
    )
    def test_known_values(self, raw, kind):
        assert FulfillmentStatus.parse(raw).kind is kind

    def test_unknown_keeps_raw(self):
        status = FulfillmentStatus.parse("En reparto")
        assert status.kind is OrderStatus.UNKNOWN
        assert status.raw == "En reparto"

    def test_empty(self):
        assert FulfillmentStatus.parse(None).kind is OrderStatus.UNKNOWN


class TestOrder:
    def test_parses_wire_values(self):
        order = _parse()
        assert order.payment_method is PaymentMethod.MOBILE_TRANSFER
        assert order.payment_status is PaymentStatus.PENDING
        assert order.fulfillment.kind is OrderStatus.PENDING
        assert order.pickup_at is None
        assert order.items[0].name is None

    def test_payment_method_is_case_insensitive(self):
        assert _parse(payment_method="card").payment_method is PaymentMethod.CARD
        assert _parse(payment_method="CASH").payment_method is PaymentMethod.CASH

    def test_unrecognised_payment_method_is_cash(self):
        assert _parse(payment_method="VOUCHER").payment_method is PaymentMethod.CASH

    def test_unrecognised_payment_status_is_unknown(self):
        assert _parse(payment_status="chargeback").payment_status is PaymentStatus.UNKNOWN

    def test_numeric_id_becomes_text(self):
        assert _parse(id=42).id == "42"

    def test_numeric_phone_becomes_text(self):
        assert _parse(customer_phone=600123123).customer_phone == "600123123"

    def test_boolean_phone_is_rejected(self):
        with pytest.raises(ValidationError):
            _parse(customer_phone=True)

    def test_missing_items_is_empty(self):
        assert _parse(items=None).items == []

    def test_subtotal(self):
        order = _parse(items=[{"quantity": 3, "unit_price_cents": 275}])
        assert order.items[0].subtotal_cents == 825

    def test_total_is_not_recomputed(self):
        order = _parse(total_cents=100, items=[{"quantity": 2, "unit_price_cents": 500}])
        assert order.total_cents == 100

    def test_non_positive_quantity_is_rejected(self):
        with pytest.raises(ValidationError):
            _parse(items=[{"quantity": 0, "unit_price_cents": 100}])

    def test_missing_total_is_rejected(self):
        data = dict(BASE)
        del data["total_cents"]
        with pytest.raises(ValidationError):
            Order.model_validate(data)
