from __future__ import annotations

from iunpack import Log, UnpackEvent, WriterResult, pattern, unpack_traced

from ._support import err_value, ok_value


def test_trace_success_with_middle():
    wr = unpack_traced(pattern("a", "b", "*c", "d"), range(6))
    assert isinstance(wr, WriterResult)
    assert ok_value(wr.result)["c"] == [2, 3, 4]
    assert wr.log == Log(
        [
            UnpackEvent("start", 0, "leading"),
            UnpackEvent("phase", 2, "middle"),
            UnpackEvent("exhausted", 6),
            UnpackEvent("finished", 6, "ok evictions=3 window_peak=1"),
        ]
    )


def test_trace_no_middle_stops_without_exhaustion():
    wr = unpack_traced(pattern("a"), range(10))
    assert wr.log.kinds() == ["start", "phase", "finished"]
    assert wr.log[1].detail == "done"


def test_trace_shortfall():
    wr = unpack_traced(pattern("a", "b"), [1])
    err_value(wr.result)
    assert wr.log.kinds() == ["start", "exhausted", "finished"]
    assert wr.log[-1].detail.startswith("TooFewElements")


def test_event_str():
    assert str(UnpackEvent("phase", 2, "middle")) == "[2] phase middle"
    assert str(UnpackEvent("exhausted", 4)) == "[4] exhausted"


def test_log_kinds_falls_back_to_type_name():
    log = Log([UnpackEvent("start", 0), 3])
    assert log.kinds() == ["start", "int"]
