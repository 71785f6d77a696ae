from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine, Iterable
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


async def slow_stream[T](items: Iterable[T], *, delay_seconds: float = 0.0) -> AsyncIterator[T]:
    """Async source that yields items one by one, like a socket or a paginated API."""
    for item in items:
        await asyncio.sleep(delay_seconds)
        yield item


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
