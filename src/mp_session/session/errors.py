"""Session – usage errors raised by ``transact``."""
from __future__ import annotations

from typing import Any

from mp_session.kernel.errors import ApplicationError
from mp_session.session.phase import Phase


class SessionUsageError(ApplicationError):
    """Raised when ``transact()`` is called from a phase that forbids it.

    Calling ``transact`` from inside ``initialize``, ``finalize`` or
    ``handle_error`` is a programming error, never delegated to the
    session's error handler.

    Attributes
    ----------
    phase:
        Phase the session was in when the call was rejected.
    """

    default_code = "session_usage_error"

    def __init__(self, phase: Phase) -> None:
        self.phase = phase
        super().__init__(f"transact() cannot be used in {phase.value} phase")

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["phase"] = self.phase.value
        return base


__all__ = ["SessionUsageError"]
