from __future__ import annotations

import asyncio

from exec_context import AbortError, AbortKind, ContextError, ContextTimeoutError, classify_reason


def test_classify_reason_kinds():
    assert classify_reason(None) is AbortKind.NONE  # nosec B101 - assert is appropriate in unit tests
    assert classify_reason(ContextTimeoutError(10)) is AbortKind.TIMEOUT  # nosec B101
    assert classify_reason(TimeoutError()) is AbortKind.TIMEOUT  # nosec B101
    assert classify_reason(asyncio.CancelledError()) is AbortKind.CANCELLED  # nosec B101
    assert classify_reason(AbortError()) is AbortKind.ABORTED  # nosec B101
    assert classify_reason("user reason") is AbortKind.CUSTOM  # nosec B101


def test_timeout_error_is_distinguished():
    err = ContextTimeoutError(250)
    assert isinstance(err, TimeoutError)
    assert isinstance(err, ContextError)
    assert not isinstance(err, AbortError)
    assert err.timeout_ms == 250
    assert str(err) == "Timeout"
    assert ContextTimeoutError.name == "TimeoutError"


def test_abort_error_defaults():
    err = AbortError()
    assert str(err) == "This operation was aborted"
    assert err.reason is None
    assert AbortKind.TIMEOUT.value == "timeout"
