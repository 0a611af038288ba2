"""Session – Phase enum."""
from __future__ import annotations
from enum import Enum


class Phase(str, Enum):
    READY = "ready"
    INITIALIZING = "initializing"
    ACTION = "action"
    FINALIZING = "finalizing"
    ERROR = "error"


__all__ = ["Phase"]
