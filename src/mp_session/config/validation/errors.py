"""Config validation – errors raised while loading settings from the environment."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mp_session.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No value was found for a settings field that has no default.

    ``setting_name`` is the environment key that was looked up
    (``MP_SESSION_LOG_LEVEL``), ``settings_class`` the class being loaded.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, settings_class: str | None = None) -> None:
        owner = f" (required by {settings_class})" if settings_class else ""
        super().__init__(f"Required setting '{setting_name}' is missing{owner}")
        self.setting_name = setting_name
        self.settings_class = settings_class

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["setting"] = self.setting_name
        if self.settings_class is not None:
            base["settings_class"] = self.settings_class
        return base


class InvalidSettingValueError(ConfigError):
    """A value was found but cannot be used.

    Either it is not one of ``allowed`` (log level names, for instance) or it
    failed type coercion, in which case ``reason`` holds the parser's message.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        *,
        allowed: Iterable[str] = (),
        reason: str | None = None,
    ) -> None:
        self.setting_name = setting_name
        self.value = value
        self.allowed: tuple[str, ...] = tuple(sorted(allowed))
        self.reason = reason
        if self.allowed:
            why = f"expected one of {', '.join(self.allowed)}"
        else:
            why = reason or "invalid value"
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {why}")

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["setting"] = self.setting_name
        if self.allowed:
            base["allowed"] = list(self.allowed)
        return base


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
