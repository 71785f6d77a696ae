from __future__ import annotations

from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class UnpackPolicy:
    """
    Configuration for a single unpack run.

    strict: for patterns without a middle collector, pull one element past
    the last slot and fail with TooManyElements if it exists. Off by default,
    so extra elements stay unconsumed in the source.
    """

    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise ValueError(f"UnpackPolicy.strict must be bool, got {type(self.strict).__name__}")

DEFAULT_POLICY = UnpackPolicy()
STRICT_POLICY = UnpackPolicy(strict=True)

__all__ = ("DEFAULT_POLICY", "STRICT_POLICY", "UnpackPolicy")
