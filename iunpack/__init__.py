"""
Streaming iterator destructuring.

Split any iterable into leading slots, an optional middle collector and
trailing slots in a single pass, buffering at most as many elements as
there are trailing slots.

Architecture:
- pattern: Slot / Rest declarations and the validated BindingSpec
- core: the Unpacker state machine, sync/async drivers, dispatch to
  success / failure continuations
- writer: Log + WriterResult for traced runs (*_w / *_traced)

Example:
    from iunpack import pattern, raising, unpack

    unpack(
        pattern("a", "b", "*c", "d"),
        range(6),
        lambda a, b, c, d: (a, b, c, d),
        raising(lambda: ValueError("too short")),
    )
    # (0, 1, [2, 3, 4], 5)
"""

# Core types
from ._types import AsyncSource, Collector, Diverge, OnFailure, Predicate, Source

# Pattern
from .pattern import WILDCARD, BindingSpec, Declaration, Rest, Slot, pattern

# Writer
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult

# Unpacking
from .core import (
    DEFAULT_POLICY,
    STRICT_POLICY,
    Bindings,
    Outcome,
    Traced,
    UnpackEvent,
    Unpacker,
    UnpackPolicy,
    Window,
    # Drivers
    aunpack,
    aunpack_w,
    unpack_result,
    unpack_traced,
    # Dispatch
    dispatch,
    raising,
    unpack,
    unpack_with,
    unpacking,
)

# Errors
from ._errors import MalformedPattern, SlotMismatch, TooFewElements, TooManyElements, UnpackError

__all__ = (
    # Types
    "AsyncSource",
    "Collector",
    "Diverge",
    "OnFailure",
    "Predicate",
    "Source",
    # Pattern
    "BindingSpec",
    "Declaration",
    "Rest",
    "Slot",
    "WILDCARD",
    "pattern",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    # State
    "Bindings",
    "Outcome",
    "Traced",
    "UnpackEvent",
    "Unpacker",
    "Window",
    # Config
    "DEFAULT_POLICY",
    "STRICT_POLICY",
    "UnpackPolicy",
    # Drivers
    "aunpack",
    "aunpack_w",
    "unpack_result",
    "unpack_traced",
    # Dispatch
    "dispatch",
    "raising",
    "unpack",
    "unpack_with",
    "unpacking",
    # Errors
    "MalformedPattern",
    "SlotMismatch",
    "TooFewElements",
    "TooManyElements",
    "UnpackError",
)
