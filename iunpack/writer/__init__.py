"""
Writer
======

Traced results: Log accumulator, WriterResult and the lazy async
LazyCoroResultWriter, built on kungfu's Result.
"""

from .log import Log
from .monad import LazyCoroResultWriter
from .result import WriterResult

__all__ = (
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
)
