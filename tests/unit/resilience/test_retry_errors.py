"""Unit tests for the retry outcome error taxonomy."""

from __future__ import annotations

import json

import pytest

from mp_retry.kernel.errors import ApplicationError, BaseError
from mp_retry.resilience.cancellation import DeadlineExceededError
from mp_retry.resilience.retry import (
    MaxTriesExceededError,
    RetryCancelledError,
    RetryError,
    RetryErrorKind,
    UnretryableError,
)


class TestKinds:
    @pytest.mark.parametrize(
        ("cls", "kind", "code"),
        [
            (UnretryableError, RetryErrorKind.UNRETRYABLE, "unretryable"),
            (MaxTriesExceededError, RetryErrorKind.MAX_TRIES_EXCEEDED, "max_tries_exceeded"),
            (RetryCancelledError, RetryErrorKind.CANCELLED, "retry_cancelled"),
        ],
    )
    def test_kind_and_code(self, cls: type[RetryError], kind: RetryErrorKind, code: str) -> None:
        err = cls(ValueError("x"))
        assert err.kind is kind
        assert err.is_kind(kind)
        assert err.code == code
        assert isinstance(err, RetryError)
        assert isinstance(err, ApplicationError)
        assert isinstance(err, BaseError)

    def test_kinds_are_mutually_exclusive(self) -> None:
        err = UnretryableError(ValueError("x"))
        assert not err.is_kind(RetryErrorKind.CANCELLED)
        assert not isinstance(err, MaxTriesExceededError)


class TestMessages:
    def test_unretryable_prefix(self) -> None:
        assert str(UnretryableError(ValueError("bad input"))) == "unretryable error: bad input"

    def test_max_tries_prefix(self) -> None:
        assert str(MaxTriesExceededError(OSError("down"))) == "reached maximum retries: down"

    def test_cancelled_uses_base_error_message(self) -> None:
        assert str(RetryCancelledError(DeadlineExceededError())) == "retry cancelled: deadline exceeded"

    def test_empty_message_falls_back_to_type_name(self) -> None:
        assert str(MaxTriesExceededError(KeyError())) == "reached maximum retries: KeyError"


class TestCauseQueries:
    def test_cause_is_chained(self) -> None:
        root = ConnectionResetError("reset")
        err = MaxTriesExceededError(root, last_attempt=4)
        assert err.cause is root
        assert err.__cause__ is root
        assert err.root_cause is root
        assert err.last_attempt == 4

    def test_has_cause_through_nested_chain(self) -> None:
        root = TimeoutError("socket")
        wrapper = RuntimeError("request failed")
        wrapper.__cause__ = root
        err = UnretryableError(wrapper)
        assert err.has_cause(wrapper)
        assert err.has_cause(TimeoutError)
        assert err.find_cause(TimeoutError) is root

    def test_except_clause_matches_by_kind(self) -> None:
        with pytest.raises(RetryError) as exc_info:
            raise MaxTriesExceededError(ValueError("x"))
        assert exc_info.value.is_kind(RetryErrorKind.MAX_TRIES_EXCEEDED)

    def test_cancelled_keeps_last_error(self) -> None:
        last = OSError("flaky")
        err = RetryCancelledError(DeadlineExceededError(), last_error=last, last_attempt=2)
        assert err.last_error is last
        assert err.has_cause(DeadlineExceededError)
        assert not err.has_cause(last)


class TestSerialisation:
    def test_to_dict_includes_kind(self) -> None:
        payload = MaxTriesExceededError(ValueError("x"), last_attempt=2).to_dict()
        assert payload["kind"] == "max_tries_exceeded"
        assert payload["last_attempt"] == 2
        assert payload["message"] == "reached maximum retries: x"
        assert "ValueError" in payload["cause"]

    def test_cancelled_to_dict_includes_last_error(self) -> None:
        payload = RetryCancelledError(DeadlineExceededError(), last_error=OSError("z")).to_dict()
        assert payload["kind"] == "cancelled"
        assert "OSError" in payload["last_error"]
        json.dumps(payload)
