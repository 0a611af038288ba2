"""Config – settings loading and validation."""
from mp_session.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsLoader
from mp_session.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
