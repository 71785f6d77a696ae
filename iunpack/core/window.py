"""Fixed-capacity FIFO ring buffer that holds the trailing candidates."""

from __future__ import annotations

import typing

class Window[T]:
    """
    Ring buffer of `capacity` slots.

    While not full, `push` appends. Once full, `rotate` swaps the oldest
    element out for a new one and returns it. Capacity 0 is always full:
    `rotate` hands the new element straight back.

    `peak` records the highest occupancy seen, for instrumentation.
    """

    __slots__ = ("_buf", "_capacity", "_head", "_size", "_peak")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Window capacity must be >= 0, got {capacity}")
        self._buf: list[typing.Any] = [None] * capacity
        self._capacity = capacity
        self._head = 0
        self._size = 0
        self._peak = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def peak(self) -> int:
        return self._peak

    @property
    def is_full(self) -> bool:
        return self._size == self._capacity

    def __len__(self) -> int:
        return self._size

    def push(self, item: T) -> None:
        if self.is_full:
            raise OverflowError("Window.push() on a full window, use rotate()")
        self._buf[(self._head + self._size) % self._capacity] = item
        self._size += 1
        if self._size > self._peak:
            self._peak = self._size

    def rotate(self, item: T) -> T:
        """Evict the oldest element, store `item` in its place."""
        if not self.is_full:
            raise ValueError("Window.rotate() before the window is full, use push()")
        if self._capacity == 0:
            return item
        oldest: T = self._buf[self._head]
        self._buf[self._head] = item
        self._head = (self._head + 1) % self._capacity
        return oldest

    def drain(self) -> tuple[T, ...]:
        """Contents in arrival order. Empties the window."""
        out = tuple(self._buf[(self._head + i) % self._capacity] for i in range(self._size))
        self._buf = [None] * self._capacity
        self._head = 0
        self._size = 0
        return out

    def __repr__(self) -> str:
        items = [self._buf[(self._head + i) % self._capacity] for i in range(self._size)]
        return f"Window({items!r}, capacity={self._capacity})"

__all__ = ("Window",)
