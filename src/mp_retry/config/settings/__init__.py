"""Config settings – 12-factor env-based configuration."""
from mp_retry.config.settings.base import Settings
from mp_retry.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_retry.config.settings.retry import RetrySettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RetrySettings", "Settings", "SettingsLoader"]
