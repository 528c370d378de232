"""Root error class for the mp-retry error hierarchy."""

from __future__ import annotations

from typing import Any, Iterator


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        import json
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / HTTP responses)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    # ------------------------------------------------------------------
    # Cause chain
    # ------------------------------------------------------------------

    def iter_causes(self) -> Iterator[BaseException]:
        """Yield every exception below this one, outermost first.

        Follows ``__cause__`` and falls back to a ``cause`` attribute, so
        errors wrapped with ``raise ... from`` and errors carrying an explicit
        ``cause`` are both walked.  Cycles stop the walk.
        """
        seen = {id(self)}
        current = self.__cause__ or self.cause
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = current.__cause__ or getattr(current, "cause", None)

    def find_cause(
        self, target: BaseException | type[BaseException]
    ) -> BaseException | None:
        """Return the first cause matching *target*, or ``None``.

        *target* is either an exception type (matched with ``isinstance``) or
        an exception instance (matched by identity).
        """
        for exc in self.iter_causes():
            if isinstance(target, type):
                if isinstance(exc, target):
                    return exc
            elif exc is target:
                return exc
        return None

    def has_cause(self, target: BaseException | type[BaseException]) -> bool:
        return self.find_cause(target) is not None

    @property
    def root_cause(self) -> BaseException:
        """Innermost exception of the chain (``self`` when nothing is wrapped)."""
        root: BaseException = self
        for exc in self.iter_causes():
            root = exc
        return root


__all__ = ["BaseError"]
