"""
BindingSpec
===========

Validated, immutable shape of a destructuring: leading slots,
an optional middle collector, trailing slots.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .._errors import MalformedPattern
from .._types import Predicate
from .slot import Declaration, Rest, Slot, parse_declaration

@dataclass(frozen=True, slots=True)
class BindingSpec:
    """Pre-validated pattern. Build with `pattern()` or `BindingSpec.from_slots()`."""

    leading: tuple[Slot[typing.Any], ...]
    middle: Rest[typing.Any, typing.Any] | None
    trailing: tuple[Slot[typing.Any], ...]

    def __post_init__(self) -> None:
        middle = self.middle
        if middle is not None and middle.lazy and self.trailing:
            raise MalformedPattern(
                self.trailing[0].name,
                f"lazy rest {middle.declaration!r} cannot be followed by slots",
            )

        seen: set[str] = set()
        for name in self.names:
            if name in seen:
                raise MalformedPattern(name, "name is bound twice")
            seen.add(name)

    @property
    def leading_count(self) -> int:
        return len(self.leading)

    @property
    def has_middle(self) -> bool:
        return self.middle is not None

    @property
    def trailing_count(self) -> int:
        return len(self.trailing)

    @property
    def min_length(self) -> int:
        return self.leading_count + self.trailing_count

    @property
    def names(self) -> tuple[str, ...]:
        """Bound names in declaration order (wildcards and anonymous middle omitted)."""
        out = [s.name for s in self.leading if s.binds]
        if self.middle is not None and self.middle.binds:
            out.append(typing.cast(str, self.middle.name))
        out.extend(s.name for s in self.trailing if s.binds)
        return tuple(out)

    @staticmethod
    def from_slots(decls: Iterable[Declaration]) -> BindingSpec:
        """
        Split declarations around the middle marker.

        Everything before the marker is leading, everything after is trailing.
        Without a marker all slots are leading. Shape checks run in __post_init__.
        """
        leading: list[Slot[typing.Any]] = []
        trailing: list[Slot[typing.Any]] = []
        middle: Rest[typing.Any, typing.Any] | None = None

        for raw in decls:
            decl = parse_declaration(raw)
            match decl:
                case Rest():
                    if middle is not None:
                        raise MalformedPattern(
                            decl.declaration,
                            f"second middle collector, {middle.declaration!r} already declared",
                        )
                    middle = decl
                case Slot():
                    if middle is None:
                        leading.append(decl)
                    else:
                        trailing.append(decl)

        return BindingSpec(tuple(leading), middle, tuple(trailing))

def _apply_where(
    spec: BindingSpec,
    where: Mapping[str, Predicate[typing.Any]],
) -> BindingSpec:
    known = {s.name for s in (*spec.leading, *spec.trailing) if s.binds}
    for name in where:
        if name not in known:
            raise MalformedPattern(name, "'where' refers to no fixed slot")

    def refine(slot: Slot[typing.Any]) -> Slot[typing.Any]:
        if slot.name in where:
            return Slot(slot.name, where=where[slot.name])
        return slot

    return BindingSpec(
        tuple(refine(s) for s in spec.leading),
        spec.middle,
        tuple(refine(s) for s in spec.trailing),
    )

def pattern(
    *decls: Declaration,
    where: Mapping[str, Predicate[typing.Any]] | None = None,
) -> BindingSpec:
    """
    Build a BindingSpec from declarations.

    Example:
        spec = pattern("a", "b", "*c", "d")
        spec = pattern("head", "*", "last", where={"head": lambda x: x > 0})
        spec = pattern("a", Rest("seen", collect=set), "z")
    """
    spec = BindingSpec.from_slots(decls)
    if where:
        spec = _apply_where(spec, where)
    return spec

__all__ = ("BindingSpec", "pattern")
