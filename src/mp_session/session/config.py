"""Session – callback records for ``Session`` and ``AsyncSession``."""
from __future__ import annotations

import dataclasses
from typing import Any, Awaitable, Callable, Generic, TypeVar

from mp_session.session.phase import Phase

S = TypeVar("S")

Initializer = Callable[[], S]
Finalizer = Callable[[S], None]
ErrorHandler = Callable[[Exception, Phase, S | None], None]

AsyncInitializer = Callable[[], Awaitable[S]]
AsyncFinalizer = Callable[[S], Awaitable[None]]
AsyncErrorHandler = Callable[[Exception, Phase, S | None], Awaitable[None]]


def _require_callable(name: str, value: Any, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


@dataclasses.dataclass(frozen=True)
class SessionConfig(Generic[S]):
    """Callbacks driving a synchronous :class:`~mp_session.session.Session`.

    ``initialize`` opens a transaction and returns the saved state,
    ``finalize`` completes it with that state, ``handle_error`` (optional)
    observes failures as ``(error, phase, state_or_none)``.
    """

    initialize: Initializer[S]
    finalize: Finalizer[S]
    handle_error: ErrorHandler[S] | None = None

    def __post_init__(self) -> None:
        _require_callable("initialize", self.initialize)
        _require_callable("finalize", self.finalize)
        _require_callable("handle_error", self.handle_error, optional=True)


@dataclasses.dataclass(frozen=True)
class AsyncSessionConfig(Generic[S]):
    """Awaitable counterpart of :class:`SessionConfig`."""

    initialize: AsyncInitializer[S]
    finalize: AsyncFinalizer[S]
    handle_error: AsyncErrorHandler[S] | None = None

    def __post_init__(self) -> None:
        _require_callable("initialize", self.initialize)
        _require_callable("finalize", self.finalize)
        _require_callable("handle_error", self.handle_error, optional=True)


__all__ = [
    "AsyncErrorHandler",
    "AsyncFinalizer",
    "AsyncInitializer",
    "AsyncSessionConfig",
    "ErrorHandler",
    "Finalizer",
    "Initializer",
    "SessionConfig",
]
