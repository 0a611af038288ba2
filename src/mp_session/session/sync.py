"""Session – synchronous reentrant transaction session."""
from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from mp_session.session.config import SessionConfig
from mp_session.session.errors import SessionUsageError
from mp_session.session.phase import Phase

S = TypeVar("S")
T = TypeVar("T")
logger = logging.getLogger(__name__)


class Session(Generic[S]):
    """Run actions in a transaction that nested calls coalesce into.

    The first ``transact`` call opens a transaction: ``initialize`` runs,
    then the action, then ``finalize`` with the state ``initialize``
    returned. Any ``transact`` call made by the action on the same session
    runs inline, so helpers that each wrap their work in ``transact`` can be
    composed under one commit.

    Usage::

        session = Session(SessionConfig(initialize=db.begin, finalize=db.commit))

        def rename(s: Session, name: str) -> None:
            s.transact(lambda _: db.update(name=name))

        session.transact(lambda s: (rename(s, "a"), rename(s, "b")))
    """

    def __init__(self, config: SessionConfig[S], *, name: str = "session") -> None:
        self.name = name
        self._initialize = config.initialize
        self._finalize = config.finalize
        self._handle_error = config.handle_error
        self._phase = Phase.READY

    @property
    def phase(self) -> Phase:
        return self._phase

    def __repr__(self) -> str:
        return f"Session(name={self.name!r}, phase={self._phase.value!r})"

    def transact(self, action: Action[S, T]) -> T:
        """Run *action* in a transaction, starting one if none is running.

        Raises :class:`SessionUsageError` when called from ``initialize``,
        ``finalize`` or ``handle_error``. Failures of the callbacks or the
        action are passed to ``handle_error`` and then re-raised.
        """
        match self._phase:
            case Phase.READY:
                return self._run_transaction(action)
            case Phase.ACTION:
                logger.debug("session.nested name=%s", self.name)
                return action(self)
            case Phase.INITIALIZING:
                raise self._reject()
            case Phase.FINALIZING:
                raise self._reject()
            case Phase.ERROR:
                raise self._reject()

    def _reject(self) -> SessionUsageError:
        logger.error("session.rejected name=%s phase=%s", self.name, self._phase.value)
        return SessionUsageError(self._phase)

    def _run_transaction(self, action: Action[S, T]) -> T:
        state: S | None = None
        try:
            logger.debug("session.begin name=%s", self.name)
            self._phase = Phase.INITIALIZING
            state = self._initialize()
            self._phase = Phase.ACTION
            result = action(self)
            self._phase = Phase.FINALIZING
            self._finalize(state)
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
                self._handle_error(exc, failed_phase, state)
            raise
        finally:
            self._phase = Phase.READY


Action = Callable[[Session[S]], T]


__all__ = ["Action", "Session"]
