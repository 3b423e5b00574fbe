"""
storefront.config.view – locale, currency and timezone used to render orders.

Env vars: ORDER_VIEW_LOCALE, ORDER_VIEW_CURRENCY, ORDER_VIEW_TIMEZONE.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError

from storefront.core.exceptions import ConfigurationError

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True)
class OrderViewConfig:
    locale: str = "es_ES"
    currency: str = "EUR"
    timezone: str = "Europe/Madrid"

    def __post_init__(self) -> None:
        try:
            Locale.parse(self.locale)
        except (UnknownLocaleError, ValueError) as exc:
            raise ValueError(f"unknown locale {self.locale!r}") from exc
        if not _CURRENCY_RE.match(self.currency or ""):
            raise ValueError(f"currency must be an ISO 4217 code, got {self.currency!r}")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {self.timezone!r}") from exc

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls, **overrides: object) -> OrderViewConfig:
        locale = overrides.get("locale") or os.environ.get("ORDER_VIEW_LOCALE", "es_ES")
        currency = overrides.get("currency") or os.environ.get("ORDER_VIEW_CURRENCY", "EUR")
        timezone = overrides.get("timezone") or os.environ.get("ORDER_VIEW_TIMEZONE", "Europe/Madrid")
        return cls(
            locale=str(locale).strip(),
            currency=str(currency).strip().upper(),
            timezone=str(timezone).strip(),
        )


def load_view_config(**overrides: object) -> OrderViewConfig:
    """Load and validate view config from env; raises ConfigurationError."""
    try:
        return OrderViewConfig.from_env(**overrides)
    except ValueError as exc:
        raise ConfigurationError(str(exc), cause=exc) from exc
