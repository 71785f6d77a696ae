"""
Streaming unpacker
==================

Single-pass destructuring of a lazy sequence against a BindingSpec.

`Unpacker` is a push-driven state machine: drivers ask `wants_more`, pull one
element, `feed` it, and call `finish` once the source is exhausted or the
machine stops asking. Buffering during the middle phase is bounded by the
trailing slot count, whatever the source length.

Drivers:
- unpack_result  - sync Iterable -> Result
- aunpack        - AsyncIterable (or Iterable) -> LazyCoroResult

NOTE: with a middle collector the drivers run until the source is
exhausted. An infinite source never completes; bounding it is on the caller.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterator

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import SlotMismatch, TooFewElements, TooManyElements, UnpackError
from .._types import AsyncSource, Source
from ..pattern import BindingSpec
from ..writer import Log
from .events import Phase, UnpackEvent
from .outcome import Bindings
from .policy import DEFAULT_POLICY, UnpackPolicy
from .window import Window

_EXHAUSTED: typing.Final = object()

class Unpacker[T]:
    """State of one unpack run. Not reusable."""

    __slots__ = (
        "spec",
        "policy",
        "window",
        "consumed",
        "evictions",
        "_leading",
        "_evicted",
        "_failure",
    )

    def __init__(self, spec: BindingSpec, policy: UnpackPolicy = DEFAULT_POLICY) -> None:
        self.spec = spec
        self.policy = policy
        self.window: Window[T] = Window(spec.trailing_count)
        self.consumed = 0
        self.evictions = 0
        self._leading: list[T] = []
        middle = spec.middle
        # Anonymous middle stores nothing
        self._evicted: list[T] | None = (
            [] if middle is not None and middle.binds and not middle.lazy else None
        )
        self._failure: UnpackError | None = None

    @property
    def phase(self) -> Phase:
        if self._failure is not None:
            return "failed"
        if len(self._leading) < self.spec.leading_count:
            return "leading"
        middle = self.spec.middle
        if middle is not None and not middle.lazy:
            return "middle"
        return "done"

    @property
    def wants_more(self) -> bool:
        """Whether the driver should pull another element."""
        match self.phase:
            case "leading" | "middle":
                return True
            case "done":
                # Strict mode pulls once past the last slot
                return self.spec.middle is None and self.policy.strict
            case "failed":
                return False

    def feed(self, item: T) -> None:
        if not self.wants_more:
            raise RuntimeError("Unpacker.feed() called after the machine stopped")

        position = self.consumed
        self.consumed += 1

        index = len(self._leading)
        if index < self.spec.leading_count:
            slot = self.spec.leading[index]
            if not slot.accepts(item):
                self._failure = SlotMismatch(slot.name, position, item)
                return
            self._leading.append(item)
            return

        if self.spec.middle is None:
            self._failure = TooManyElements(self.spec.leading_count)
            return

        if self.window.is_full:
            evicted = self.window.rotate(item)
            self.evictions += 1
            if self._evicted is not None:
                self._evicted.append(evicted)
        else:
            self.window.push(item)

    def finish(self, rest: typing.Any = None) -> Result[Bindings[T], UnpackError]:
        """
        Close the run and build the outcome.

        `rest` is the live source iterator, bound to a lazy middle collector.
        Partial bindings are discarded on failure.
        """
        if self._failure is not None:
            return Error(self._failure)

        spec = self.spec
        if len(self._leading) < spec.leading_count or len(self.window) < spec.trailing_count:
            return Error(TooFewElements(spec.min_length, self.consumed))

        trailing = self.window.drain()
        first_trailing = self.consumed - len(trailing)
        for offset, (slot, value) in enumerate(zip(spec.trailing, trailing)):
            if not slot.accepts(value):
                return Error(SlotMismatch(slot.name, first_trailing + offset, value))

        middle_value: typing.Any = None
        middle = spec.middle
        if middle is not None and middle.binds:
            if middle.lazy:
                middle_value = rest
            else:
                middle_value = middle.collect(self._evicted or [])

        return Ok(Bindings(spec, tuple(self._leading), middle_value, trailing))

def _trace_finish[T](
    trace: Log[UnpackEvent],
    machine: Unpacker[T],
    outcome: Result[Bindings[T], UnpackError],
) -> None:
    match outcome:
        case Ok(_):
            detail = f"ok evictions={machine.evictions} window_peak={machine.window.peak}"
        case Error(err):
            detail = f"{type(err).__name__}: {err}"
    trace.append(UnpackEvent("finished", machine.consumed, detail))

def drive[T](
    machine: Unpacker[T],
    source: Source[T],
    *,
    trace: Log[UnpackEvent] | None = None,
) -> Result[Bindings[T], UnpackError]:
    """Pull from `source` into `machine` until it stops asking or the source ends."""
    it: Iterator[T] = iter(source)
    phase = machine.phase
    if trace is not None:
        trace.append(UnpackEvent("start", 0, phase))

    while machine.wants_more:
        item = next(it, _EXHAUSTED)
        if item is _EXHAUSTED:
            if trace is not None:
                trace.append(UnpackEvent("exhausted", machine.consumed))
            break
        machine.feed(typing.cast(T, item))
        if trace is not None and machine.phase != phase:
            phase = machine.phase
            trace.append(UnpackEvent("phase", machine.consumed, phase))

    outcome = machine.finish(rest=it)
    if trace is not None:
        _trace_finish(trace, machine, outcome)
    return outcome

async def adrive[T](
    machine: Unpacker[T],
    source: AsyncIterable[T],
    *,
    trace: Log[UnpackEvent] | None = None,
) -> Result[Bindings[T], UnpackError]:
    """Async counterpart of `drive`. Suspends only inside the source."""
    it: AsyncIterator[T] = aiter(source)
    phase = machine.phase
    if trace is not None:
        trace.append(UnpackEvent("start", 0, phase))

    while machine.wants_more:
        item = await anext(it, _EXHAUSTED)
        if item is _EXHAUSTED:
            if trace is not None:
                trace.append(UnpackEvent("exhausted", machine.consumed))
            break
        machine.feed(typing.cast(T, item))
        if trace is not None and machine.phase != phase:
            phase = machine.phase
            trace.append(UnpackEvent("phase", machine.consumed, phase))

    outcome = machine.finish(rest=it)
    if trace is not None:
        _trace_finish(trace, machine, outcome)
    return outcome

def unpack_result[T](
    spec: BindingSpec,
    source: Source[T],
    *,
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> Result[Bindings[T], UnpackError]:
    """
    Destructure `source` against `spec`.

    Returns Ok(Bindings) or Error(UnpackError). Never raises for a short or
    mismatching source; exceptions from the source itself propagate.

    Example:
        match unpack_result(pattern("a", "b", "*c", "d"), range(6)):
            case Ok(b):
                b["c"]  # [2, 3, 4]
            case Error(err):
                ...
    """
    return drive(Unpacker(spec, policy), source)

def aunpack[T](
    spec: BindingSpec,
    source: AsyncSource[T],
    *,
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> LazyCoroResult[Bindings[T], UnpackError]:
    """
    Lazy async unpack. Nothing is pulled until the result is awaited.

    Accepts async iterables and plain iterables.
    """

    async def run() -> Result[Bindings[T], UnpackError]:
        machine: Unpacker[T] = Unpacker(spec, policy)
        if isinstance(source, AsyncIterable):
            return await adrive(machine, source)
        return drive(machine, source)

    return LazyCoroResult(run)

__all__ = (
    "Unpacker",
    "adrive",
    "aunpack",
    "drive",
    "unpack_result",
)
