"""Root of the mp-session error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Error raised by mp-session itself, never by user callbacks.

    ``code`` is a stable slug for log processors and ``detail`` extra context;
    both end up in :meth:`to_dict`. Chain the triggering exception with
    ``raise ... from exc``; it is reported as ``cause``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
