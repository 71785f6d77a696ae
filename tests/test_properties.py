from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from iunpack import STRICT_POLICY, TooFewElements, TooManyElements, pattern, unpack, unpack_result

from ._support import Counting, err_value, ok_value

MAX_EXAMPLES = 300


def spec_for(leading: int, trailing: int, *, middle: bool = True):
    decls = [f"l{i}" for i in range(leading)]
    if middle:
        decls.append("*mid")
    decls.extend(f"t{i}" for i in range(trailing))
    return pattern(*decls)


@given(
    items=st.lists(st.integers(), max_size=40),
    leading=st.integers(min_value=0, max_value=6),
    trailing=st.integers(min_value=0, max_value=6),
)
@settings(max_examples=MAX_EXAMPLES)
def test_slice_equivalence(items, leading, trailing):
    n = len(items)
    result = unpack_result(spec_for(leading, trailing), iter(items))
    if n < leading + trailing:
        err = err_value(result)
        assert isinstance(err, TooFewElements)
        assert err.consumed == n
        return
    b = ok_value(result)
    assert list(b.leading) == items[:leading]
    assert list(b.trailing) == items[n - trailing :]
    assert b.middle == items[leading : n - trailing]


@given(
    items=st.lists(st.integers(), max_size=20),
    leading=st.integers(min_value=0, max_value=5),
    trailing=st.integers(min_value=0, max_value=5),
)
@settings(max_examples=MAX_EXAMPLES)
def test_shortfall_never_calls_success(items, leading, trailing):
    calls = {"ok": 0, "fail": 0}

    def on_success(**_):
        calls["ok"] += 1

    def on_failure():
        calls["fail"] += 1

    unpack(spec_for(leading, trailing), items, on_success, on_failure)
    if len(items) < leading + trailing:
        assert calls == {"ok": 0, "fail": 1}
    else:
        assert calls == {"ok": 1, "fail": 0}


@given(
    items=st.lists(st.integers(), max_size=20),
    leading=st.integers(min_value=0, max_value=8),
)
@settings(max_examples=MAX_EXAMPLES)
def test_no_middle_exactness(items, leading):
    src = Counting(items)
    result = unpack_result(spec_for(leading, 0, middle=False), src)
    assert src.pulled == min(leading, len(items))
    if len(items) >= leading:
        assert list(ok_value(result).leading) == items[:leading]
    else:
        assert isinstance(err_value(result), TooFewElements)


@given(
    items=st.lists(st.integers(), max_size=20),
    leading=st.integers(min_value=0, max_value=8),
)
@settings(max_examples=MAX_EXAMPLES)
def test_strict_requires_exact_length(items, leading):
    result = unpack_result(spec_for(leading, 0, middle=False), items, policy=STRICT_POLICY)
    if len(items) == leading:
        assert list(ok_value(result).leading) == items
    elif len(items) > leading:
        assert isinstance(err_value(result), TooManyElements)
    else:
        assert isinstance(err_value(result), TooFewElements)
