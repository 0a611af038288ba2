"""Session – asyncio variant of the reentrant transaction session."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Generic, TypeVar

from mp_session.session.config import AsyncSessionConfig
from mp_session.session.errors import SessionUsageError
from mp_session.session.phase import Phase

S = TypeVar("S")
T = TypeVar("T")
logger = logging.getLogger(__name__)


class AsyncSession(Generic[S]):
    """Asynchronous version of :class:`~mp_session.session.Session`.

    Every step is awaited on the calling task before the next one starts.
    Nested ``transact`` calls must be awaited by the running action; a
    session shared by independent tasks needs external serialisation.
    """

    def __init__(self, config: AsyncSessionConfig[S], *, name: str = "session") -> None:
        self.name = name
        self._initialize = config.initialize
        self._finalize = config.finalize
        self._handle_error = config.handle_error
        self._phase = Phase.READY

    @property
    def phase(self) -> Phase:
        return self._phase

    def __repr__(self) -> str:
        return f"AsyncSession(name={self.name!r}, phase={self._phase.value!r})"

    async def transact(self, action: AsyncAction[S, T]) -> T:
        """Await *action* in a transaction, starting one if none is running."""
        match self._phase:
            case Phase.READY:
                return await self._run_transaction(action)
            case Phase.ACTION:
                logger.debug("session.nested name=%s", self.name)
                return await action(self)
            case Phase.INITIALIZING:
                raise self._reject()
            case Phase.FINALIZING:
                raise self._reject()
            case Phase.ERROR:
                raise self._reject()

    def _reject(self) -> SessionUsageError:
        logger.error("session.rejected name=%s phase=%s", self.name, self._phase.value)
        return SessionUsageError(self._phase)

    async def _run_transaction(self, action: AsyncAction[S, T]) -> T:
        state: S | None = None
        try:
            logger.debug("session.begin name=%s", self.name)
            self._phase = Phase.INITIALIZING
            state = await self._initialize()
            self._phase = Phase.ACTION
            result = await action(self)
            self._phase = Phase.FINALIZING
            await self._finalize(state)
            logger.debug("session.commit name=%s", self.name)
            return result
        except Exception as exc:
            failed_phase = self._phase
            self._phase = Phase.ERROR
            logger.warning(
                "session.failed name=%s phase=%s error=%r",
                self.name, failed_phase.value, exc,
            )
            if self._handle_error is not None:
                await self._handle_error(exc, failed_phase, state)
            raise
        finally:
            self._phase = Phase.READY


AsyncAction = Callable[[AsyncSession[S]], Awaitable[T]]


__all__ = ["AsyncAction", "AsyncSession"]
