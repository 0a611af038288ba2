"""
mp_session – reentrant transaction sessions.

Import path convention::

    from mp_session import Session, SessionConfig
    from mp_session.session import AsyncSession, transactional
    from mp_session.observability.logging import JsonLoggerFactory
"""

from mp_session.session import (
    AsyncSession,
    AsyncSessionConfig,
    Phase,
    Session,
    SessionConfig,
    SessionUsageError,
    transactional,
)

__version__ = "0.1.0"
__all__ = [
    "AsyncSession",
    "AsyncSessionConfig",
    "Phase",
    "Session",
    "SessionConfig",
    "SessionUsageError",
    "__version__",
    "transactional",
]
