"""Observability – structured logging setup."""
from mp_session.observability.logging.factory import JsonLoggerFactory

__all__ = ["JsonLoggerFactory"]
