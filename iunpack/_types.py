"""
Core type definitions for iunpack.

Aliases shared by the pattern layer, the unpacker and the dispatcher.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, Callable, Iterable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = test applied to the element landing in a fixed slot
type Predicate[T] = Callable[[T], bool]

# Collector = builds the middle value from the evicted elements, in order
type Collector[T, C] = Callable[[Iterable[T]], C]

# Source = anything the drivers can pull from
type Source[T] = Iterable[T]
type AsyncSource[T] = AsyncIterable[T] | Iterable[T]

# OnFailure = zero-arg fallback; may return a substitute or diverge
type OnFailure[R] = Callable[[], R]

# Diverge = failure continuation that never returns normally
type Diverge = Callable[[], typing.NoReturn]

__all__ = (
    "AsyncSource",
    "Collector",
    "Diverge",
    "OnFailure",
    "Predicate",
    "Source",
)
