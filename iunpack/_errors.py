from __future__ import annotations

import typing

class MalformedPattern(ValueError):
    """Pattern cannot be turned into a BindingSpec."""

    declaration: str

    def __init__(self, declaration: str, reason: str) -> None:
        self.declaration = declaration
        super().__init__(f"Malformed pattern {declaration!r}: {reason}")

class UnpackError(Exception):
    """Base for runtime unpack failures. Returned inside Error(...), never raised by the core."""

class TooFewElements(UnpackError):
    """Source ran out before every fixed slot was filled."""

    required: int
    consumed: int

    def __init__(self, required: int, consumed: int) -> None:
        self.required = required
        self.consumed = consumed
        super().__init__(f"Expected at least {required} elements, got {consumed}")

class TooManyElements(UnpackError):
    """Strict pattern without a middle saw an element past the last slot."""

    expected: int

    def __init__(self, expected: int) -> None:
        self.expected = expected
        super().__init__(f"Expected exactly {expected} elements, got more")

class SlotMismatch(UnpackError):
    """Element at a fixed slot failed the slot's predicate."""

    slot: str
    position: int
    value: typing.Any

    def __init__(self, slot: str, position: int, value: typing.Any) -> None:
        self.slot = slot
        self.position = position
        self.value = value
        super().__init__(f"Slot {slot!r} rejected {value!r} at position {position}")

__all__ = (
    "MalformedPattern",
    "SlotMismatch",
    "TooFewElements",
    "TooManyElements",
    "UnpackError",
)
