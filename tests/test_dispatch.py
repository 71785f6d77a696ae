from __future__ import annotations

import logging

import pytest
from kungfu import Error

from iunpack import (
    STRICT_POLICY,
    TooFewElements,
    TooManyElements,
    dispatch,
    pattern,
    raising,
    unpack,
    unpack_result,
    unpack_with,
    unpacking,
)

ABCD = pattern("a", "b", "*c", "d")


class Calls:
    def __init__(self) -> None:
        self.success: list[dict] = []
        self.failure = 0

    def on_success(self, **kwargs):
        self.success.append(kwargs)
        return "ok"

    def on_failure(self):
        self.failure += 1
        return "fallback"


def test_success_branch_gets_named_values():
    calls = Calls()
    assert unpack(ABCD, range(6), calls.on_success, calls.on_failure) == "ok"
    assert calls.success == [{"a": 0, "b": 1, "c": [2, 3, 4], "d": 5}]
    assert calls.failure == 0


def test_failure_branch_called_once_with_no_args():
    calls = Calls()
    assert unpack(ABCD, range(2), calls.on_success, calls.on_failure) == "fallback"
    assert calls.success == []
    assert calls.failure == 1


def test_success_continuation_as_plain_function():
    def body(a, b, c, d):
        return a + b + sum(c) + d

    assert unpack(ABCD, range(6), body, lambda: -1) == 15
    assert unpack(ABCD, range(2), body, lambda: -1) == -1


def test_diverging_failure_raises():
    fail = raising(lambda: RuntimeError("not enough values"))
    with pytest.raises(RuntimeError, match="not enough values"):
        unpack(ABCD, [0], lambda **_: None, fail)


def test_success_exception_propagates():
    def body(**_):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        unpack(ABCD, range(5), body, lambda: None)


def test_source_exception_propagates():
    def source():
        yield 1
        raise ValueError("broken source")

    with pytest.raises(ValueError, match="broken source"):
        unpack(pattern("*all"), source(), lambda all: all, lambda: None)


def test_dispatch_on_prebuilt_outcome():
    outcome = unpack_result(pattern("x", "*", "y"), "abc")
    assert dispatch(outcome, lambda x, y: x + y, lambda: "") == "ac"
    assert dispatch(Error(TooFewElements(1, 0)), lambda **_: "ok", lambda: "no") == "no"


def test_dispatch_ok_with_bindings_only():
    outcome = unpack_result(pattern(), [])
    assert dispatch(outcome, lambda: "empty", lambda: "no") == "empty"


def test_unpack_with_passes_error():
    err = unpack_with(ABCD, [0, 1], lambda **_: None, lambda e: e)
    assert isinstance(err, TooFewElements)
    assert err.consumed == 2


def test_unpack_with_strict():
    err = unpack_with(pattern("a"), [1, 2], lambda a: a, lambda e: e, policy=STRICT_POLICY)
    assert isinstance(err, TooManyElements)


def test_failure_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="iunpack.core.dispatch"):
        unpack(ABCD, [], lambda **_: None, lambda: None)
    assert any("unpack failed" in r.getMessage() for r in caplog.records)


def test_unpacking_decorator():
    @unpacking("head", "*body", "tail", on_failure=lambda: None)
    def ends(head, body, tail):
        return head, "".join(body), tail

    assert ends("abcd") == ("a", "bc", "d")
    assert ends("a") is None
    assert ends.__name__ == "ends"
    assert ends.spec.names == ("head", "body", "tail")


def test_unpacking_decorator_strict():
    @unpacking("x", "y", on_failure=lambda: "bad", policy=STRICT_POLICY)
    def pair(x, y):
        return (x, y)

    assert pair([1, 2]) == (1, 2)
    assert pair([1, 2, 3]) == "bad"


def test_unpacking_rejects_malformed_at_decoration():
    from iunpack import MalformedPattern

    with pytest.raises(MalformedPattern):
        unpacking("*a", "*b", on_failure=lambda: None)
