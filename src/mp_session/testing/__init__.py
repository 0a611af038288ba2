"""Testing – helpers for exercising code built on sessions."""
from mp_session.testing.fakes import AsyncCallRecorder, CallRecorder

__all__ = ["AsyncCallRecorder", "CallRecorder"]
