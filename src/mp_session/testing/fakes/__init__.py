"""Testing fakes – in-memory doubles for session callbacks."""
from mp_session.testing.fakes.recorder import AsyncCallRecorder, CallRecorder

__all__ = ["AsyncCallRecorder", "CallRecorder"]
