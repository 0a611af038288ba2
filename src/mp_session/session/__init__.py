"""Session – reentrant transaction sessions that coalesce nested calls."""
from mp_session.session.phase import Phase
from mp_session.session.errors import SessionUsageError
from mp_session.session.config import AsyncSessionConfig, SessionConfig
from mp_session.session.sync import Action, Session
from mp_session.session.aio import AsyncAction, AsyncSession
from mp_session.session.decorators import transactional

__all__ = [
    "Action",
    "AsyncAction",
    "AsyncSession",
    "AsyncSessionConfig",
    "Phase",
    "Session",
    "SessionConfig",
    "SessionUsageError",
    "transactional",
]
