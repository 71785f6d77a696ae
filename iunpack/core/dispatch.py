"""
Outcome dispatch
================

Turns an Outcome into exactly one continuation call.

- dispatch     - Outcome + on_success + on_failure()
- unpack       - unpack_result + dispatch, the main entry point
- unpack_with  - failure continuation receives the UnpackError
- unpacking    - decorator form, lifts a success function over a source
- raising      - diverging failure continuation
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable
from functools import wraps

from kungfu import Error, Ok, Result

from .._errors import UnpackError
from .._types import Diverge, OnFailure
from ..pattern import BindingSpec, Declaration, pattern
from .outcome import Bindings
from .policy import DEFAULT_POLICY, UnpackPolicy
from .unpacker import unpack_result

logger = logging.getLogger(__name__)

def dispatch[T, R](
    outcome: Result[Bindings[T], UnpackError],
    on_success: Callable[..., R],
    on_failure: OnFailure[R],
) -> R:
    """
    Call exactly one continuation, exactly once.

    on_success gets every bound value as a keyword argument named after its
    slot. on_failure gets nothing; it may return a fallback or never return.
    """
    match outcome:
        case Ok(bindings):
            return on_success(**bindings.as_kwargs())
        case Error(err):
            logger.debug("unpack failed, taking fallback: %s", err)
            return on_failure()
        case _ as unreachable:
            typing.assert_never(unreachable)

def unpack[T, R](
    spec: BindingSpec,
    source: Iterable[T],
    on_success: Callable[..., R],
    on_failure: OnFailure[R],
    *,
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> R:
    """
    Destructure `source` and continue with one of two branches.

    Example:
        unpack(
            pattern("a", "b", "*c", "d"),
            range(6),
            lambda a, b, c, d: (a, b, c, d),   # (0, 1, [2, 3, 4], 5)
            raising(lambda: ValueError("need at least 3 values")),
        )

    NOTE: with a middle collector the whole source is consumed. An infinite
    source never returns.
    """
    return dispatch(unpack_result(spec, source, policy=policy), on_success, on_failure)

def unpack_with[T, R](
    spec: BindingSpec,
    source: Iterable[T],
    on_success: Callable[..., R],
    on_error: Callable[[UnpackError], R],
    *,
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> R:
    """Like `unpack`, but the failure branch sees why it failed."""
    match unpack_result(spec, source, policy=policy):
        case Ok(bindings):
            return on_success(**bindings.as_kwargs())
        case Error(err):
            logger.debug("unpack failed, passing error on: %s", err)
            return on_error(err)
        case _ as unreachable:
            typing.assert_never(unreachable)

def unpacking[T, R](
    *decls: Declaration,
    on_failure: OnFailure[R],
    policy: UnpackPolicy = DEFAULT_POLICY,
) -> Callable[[Callable[..., R]], Callable[[Iterable[T]], R]]:
    """
    Decorator: turn a success function into a function of the source.

    The pattern is built once, at decoration time, so a malformed pattern
    fails on import rather than on first call.

    Example:
        @unpacking("head", "*body", "tail", on_failure=lambda: None)
        def ends(head, body, tail):
            return head, tail

        ends("abcd")  # ("a", "d")
    """
    spec = pattern(*decls)

    def decorator(func: Callable[..., R]) -> Callable[[Iterable[T]], R]:
        @wraps(func)
        def wrapper(source: Iterable[T]) -> R:
            return unpack(spec, source, func, on_failure, policy=policy)

        wrapper.spec = spec  # type: ignore[attr-defined]
        return wrapper

    return decorator

def raising(exc: Callable[[], BaseException]) -> Diverge:
    """Failure continuation that always raises exc()."""

    def diverge() -> typing.NoReturn:
        raise exc()

    return diverge

__all__ = (
    "dispatch",
    "raising",
    "unpack",
    "unpack_with",
    "unpacking",
)
