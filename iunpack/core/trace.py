"""
Traced unpack
=============

Same runs as unpack_result / aunpack, paired with a Log[UnpackEvent].
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable

from kungfu import Result

from .._errors import UnpackError
from .._types import AsyncSource
from ..pattern import BindingSpec
from ..writer import LazyCoroResultWriter, Log, WriterResult
from .events import UnpackEvent
from .outcome import Bindings
from .policy import DEFAULT_POLICY, UnpackPolicy
from .unpacker import Unpacker, adrive, drive

type Traced[T] = WriterResult[Bindings[T], UnpackError, Log[UnpackEvent]]

def unpack_traced[T](
    spec: BindingSpec,
    source: Iterable[T],
    *,
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> Traced[T]:
    """Sync unpack that also reports phase changes, exhaustion and the final outcome."""
    log = Log[UnpackEvent]()
    result: Result[Bindings[T], UnpackError] = drive(Unpacker(spec, policy), source, trace=log)
    return WriterResult(result, log)

def aunpack_w[T](
    spec: BindingSpec,
    source: AsyncSource[T],
    *,
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> LazyCoroResultWriter[Bindings[T], UnpackError, UnpackEvent]:
    """Lazy async unpack with a trace. Runs on await."""

    async def run() -> Traced[T]:
        log = Log[UnpackEvent]()
        machine: Unpacker[T] = Unpacker(spec, policy)
        if isinstance(source, AsyncIterable):
            result = await adrive(machine, source, trace=log)
        else:
            result = drive(machine, source, trace=log)
        return WriterResult(result, log)

    return LazyCoroResultWriter(run)

__all__ = ("Traced", "aunpack_w", "unpack_traced")
