"""Application-layer errors — misuse of a library primitive by its caller."""

from __future__ import annotations

from mp_session.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
