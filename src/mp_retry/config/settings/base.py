"""Config settings – Settings base class.

A settings class is a dataclass whose fields map one-to-one onto
environment variables named ``<PREFIX>_<FIELD>``::

    @dataclasses.dataclass
    class RetrySettings(Settings):
        _prefix: ClassVar[str] = "RETRY"
        max_attempts: int = 0        # RETRY_MAX_ATTEMPTS
"""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Iterator


@dataclasses.dataclass
class Settings:
    """Validated on construction; subclasses override :meth:`_validate`."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for range and cross-field checks."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    @classmethod
    def setting_fields(cls) -> Iterator[dataclasses.Field[Any]]:
        yield from dataclasses.fields(cls)  # type: ignore[arg-type]

    def as_env(self) -> dict[str, str]:
        """Inverse of loading: the variables that would reproduce this instance."""
        return {self.env_key(f.name): _render(getattr(self, f.name)) for f in self.setting_fields()}


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(str(v) for v in value)
    return str(value)


__all__ = ["Settings"]
