from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

type EventKind = Literal["start", "phase", "exhausted", "finished"]
type Phase = Literal["leading", "middle", "done", "failed"]

@dataclass(frozen=True, slots=True)
class UnpackEvent:
    """One entry of an unpack trace. `consumed` is the element count at that point."""

    kind: EventKind
    consumed: int
    detail: str = ""

    def __str__(self) -> str:
        suffix = f" {self.detail}" if self.detail else ""
        return f"[{self.consumed}] {self.kind}{suffix}"

__all__ = ("EventKind", "Phase", "UnpackEvent")
