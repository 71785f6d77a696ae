"""
Log - ordered trace for traced runs
===================================
"""

from __future__ import annotations

class Log[A](list[A]):
    """Ordered trace of entries. A plain list; drivers append as the run progresses."""

    def kinds(self) -> list[str]:
        """Entry kinds in order, for entries that carry one."""
        return [getattr(entry, "kind", type(entry).__name__) for entry in self]

__all__ = ("Log",)
