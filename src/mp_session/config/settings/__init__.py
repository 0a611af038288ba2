"""Config settings – 12-factor env-based configuration."""
from mp_session.config.settings.base import LoggingSettings, Settings
from mp_session.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
