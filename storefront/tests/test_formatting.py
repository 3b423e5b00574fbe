"""Tests for locale-aware money and date formatting."""
from datetime import datetime, timezone

from babel.numbers import format_currency

from storefront.config.view import OrderViewConfig
from storefront.views.formatting import OrderFormatter, min_grouping_digits


class TestMoney:
    def test_spanish_euro_amount(self):
        text = OrderFormatter().money(1250)
        assert "12,50" in text
        assert text.endswith("€")

    def test_matches_locale_formatting_of_major_units(self):
        fmt = OrderFormatter()
        for cents in (0, 1, 99, 1000, 99999):
            assert fmt.money(cents) == format_currency(cents / 100, "EUR", locale="es_ES")

    def test_four_digit_spanish_amount_is_not_grouped(self):
        fmt = OrderFormatter()
        assert fmt.money(123450) == "1234,50\xa0€"

    def test_five_digit_spanish_amount_is_grouped(self):
        assert OrderFormatter().money(1234550) == "12.345,50\xa0€"

    def test_single_grouping_digit_locale_groups_thousands(self):
        fmt = OrderFormatter(OrderViewConfig(locale="en_US", currency="USD", timezone="UTC"))
        assert fmt.money(123450) == "$1,234.50"

    def test_min_grouping_digits_by_language(self):
        assert min_grouping_digits("es_ES") == 2
        assert min_grouping_digits("es_MX") == 2
        assert min_grouping_digits("en_US") == 1

    def test_other_locale_and_currency(self):
        fmt = OrderFormatter(OrderViewConfig(locale="en_US", currency="USD", timezone="UTC"))
        assert fmt.money(1250) == "$12.50"


class TestMoment:
    def test_aware_timestamp_is_converted_to_configured_zone(self):
        fmt = OrderFormatter()
        assert fmt.moment(datetime(2024, 1, 15, 9, 5, tzinfo=timezone.utc)) == "15/01, 10:05"

    def test_naive_timestamp_is_taken_as_local(self):
        fmt = OrderFormatter()
        assert fmt.moment(datetime(2024, 1, 15, 9, 5)) == "15/01, 09:05"

    def test_optional_none_is_placeholder(self):
        assert OrderFormatter().optional_moment(None) == "—"
