"""Money and date formatting bound to the configured locale, currency and timezone."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from babel import Locale
from babel.dates import format_datetime
from babel.numbers import format_currency

from storefront.config.view import OrderViewConfig

PICKUP_PLACEHOLDER = "—"
DATETIME_PATTERN = "dd/MM, HH:mm"

# CLDR minimumGroupingDigits for languages where it is not 1. Babel ignores
# this setting, so "1234,50 €" would otherwise come out as "1.234,50 €".
MIN_GROUPING_DIGITS = {"es": 2, "pl": 2}


def min_grouping_digits(locale: str) -> int:
    return MIN_GROUPING_DIGITS.get(Locale.parse(locale).language, 1)


class OrderFormatter:
    def __init__(self, config: Optional[OrderViewConfig] = None) -> None:
        self._config = config or OrderViewConfig()
        self._tz = self._config.tzinfo
        # Integer parts below this are written without a group separator.
        self._grouping_from = 10 ** (2 + min_grouping_digits(self._config.locale))

    @property
    def config(self) -> OrderViewConfig:
        return self._config

    def money(self, cents: int) -> str:
        """Minor units -> e.g. ``12,50 €`` for es_ES/EUR."""
        return format_currency(
            Decimal(cents) / 100,
            self._config.currency,
            locale=self._config.locale,
            group_separator=abs(cents) // 100 >= self._grouping_from,
        )

    def moment(self, value: datetime) -> str:
        """Day/month and hour:minute in the configured timezone.

        Naive timestamps are taken to be local already.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=self._tz)
        return format_datetime(
            value,
            DATETIME_PATTERN,
            tzinfo=self._tz,
            locale=self._config.locale,
        )

    def optional_moment(self, value: Optional[datetime]) -> str:
        if value is None:
            return PICKUP_PLACEHOLDER
        return self.moment(value)
