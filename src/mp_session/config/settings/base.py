"""Config settings – Settings base class and logging settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_session.config.validation import InvalidSettingValueError

_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Log output for session diagnostics (``MP_SESSION_LOG_LEVEL``, ``MP_SESSION_LOG_JSON``)."""

    _prefix: ClassVar[str] = "MP_SESSION_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in _LEVEL_NAMES:
            raise InvalidSettingValueError("level", self.level, allowed=_LEVEL_NAMES)

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["LoggingSettings", "Settings"]
