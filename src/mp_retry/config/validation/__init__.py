"""Config validation errors."""
from mp_retry.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    require_non_negative,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "require_non_negative",
]
