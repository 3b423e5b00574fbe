"""
Root of the storefront error hierarchy.

An error's ``message`` is the text the page may show the customer. ``code``
and ``http_status`` come from class attributes unless given per instance,
and ``to_dict()`` is what gets logged and returned as a JSON error body.
"""
from __future__ import annotations

import traceback
from typing import Any, Dict, List, Optional, Type


def _format_cause(exc: BaseException) -> List[str]:
    return traceback.format_exception(type(exc), exc, exc.__traceback__)


class StorefrontError(Exception):
    """Base class for errors raised by storefront code."""

    default_code: str = "ERROR"
    default_http_status: int = 500

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        http_status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        cls = type(self)
        self.message = message
        self.code = code or cls.default_code
        self.http_status = http_status or cls.default_http_status
        self.details: Dict[str, Any] = dict(details or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        """The wrapped exception, whether passed in or chained with ``raise ... from``."""
        return self.__cause__

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return "%s(%r, code=%r, http_status=%d)" % (
            type(self).__name__,
            self.message,
            self.code,
            self.http_status,
        )

    def to_dict(self, *, include_traceback: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "message": self.message,
            "code": self.code,
            "http_status": self.http_status,
        }
        if self.details:
            payload["details"] = dict(self.details)
        cause = self.cause
        if cause is None:
            return payload
        payload["cause"] = str(cause)
        if include_traceback:
            payload["cause_traceback"] = _format_cause(cause)
        return payload


def exception_factory(
    name: str,
    *,
    code: Optional[str] = None,
    http_status: int = 500,
    base: Type[StorefrontError] = StorefrontError,
) -> Type[StorefrontError]:
    """Build a ``base`` subclass called ``name``.

    Without ``code`` the class name is upper-cased, spaces becoming
    underscores: ``"PrintError"`` gives ``"PRINTERROR"``.
    """
    attrs = {
        "default_code": code or name.upper().replace(" ", "_"),
        "default_http_status": http_status,
        "__module__": base.__module__,
    }
    return type(name, (base,), attrs)
