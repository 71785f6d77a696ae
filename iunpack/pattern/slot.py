"""
Slot declarations
=================

Building blocks of a pattern: fixed slots and the middle collector.
"""

from __future__ import annotations

import keyword
import typing
from dataclasses import dataclass

from .._errors import MalformedPattern
from .._types import Collector, Predicate

WILDCARD = "_"

def _check_name(name: str, declaration: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise MalformedPattern(declaration, f"{name!r} is not a valid identifier")

@dataclass(frozen=True, slots=True)
class Slot[T]:
    """
    Fixed-position slot (leading or trailing).

    The wildcard name "_" consumes an element without binding it.
    `where` makes the slot refutable: a rejected element fails the unpack.
    """

    name: str
    where: Predicate[T] | None = None

    def __post_init__(self) -> None:
        _check_name(self.name, self.name)

    @property
    def binds(self) -> bool:
        return self.name != WILDCARD

    def accepts(self, value: T) -> bool:
        return self.where is None or self.where(value)

@dataclass(frozen=True, slots=True)
class Rest[T, C]:
    """
    Middle collector.

    - name=None or "_": anonymous, elements are skipped and never stored
    - collect: builds the bound value from evicted elements (list by default)
    - lazy: bind the live iterator after the leading slots instead of draining it
    """

    name: str | None = None
    collect: Collector[T, C] = list  # type: ignore[assignment]
    lazy: bool = False

    def __post_init__(self) -> None:
        if self.name is not None:
            _check_name(self.name, self.declaration)
        if self.lazy and not self.binds:
            raise MalformedPattern(self.declaration, "lazy rest needs a name")

    @property
    def binds(self) -> bool:
        return self.name is not None and self.name != WILDCARD

    @property
    def declaration(self) -> str:
        marker = "*=" if self.lazy else "*"
        return f"{marker}{self.name or ''}"

type Declaration = Slot[typing.Any] | Rest[typing.Any, typing.Any] | str

def parse_declaration(decl: Declaration) -> Slot[typing.Any] | Rest[typing.Any, typing.Any]:
    """
    Turn string shorthand into a declaration object.

        "a"     -> Slot("a")
        "*c"    -> Rest("c")
        "*"     -> Rest()
        "*=it"  -> Rest("it", lazy=True)
    """
    if isinstance(decl, (Slot, Rest)):
        return decl
    if not isinstance(decl, str):
        raise MalformedPattern(repr(decl), "expected str, Slot or Rest")
    if decl.startswith("*="):
        return Rest(decl[2:], lazy=True)
    if decl == "*":
        return Rest()
    if decl.startswith("*"):
        return Rest(decl[1:])
    return Slot(decl)

__all__ = (
    "Declaration",
    "Rest",
    "Slot",
    "WILDCARD",
    "parse_declaration",
)
