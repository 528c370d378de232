"""Config – 12-factor settings for retry policies."""

from mp_retry.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RetrySettings,
    Settings,
    SettingsLoader,
)
from mp_retry.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RetrySettings",
    "Settings",
    "SettingsLoader",
]
