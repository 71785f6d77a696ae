"""
Outcome of one unpack run.

Success carries Bindings, failure carries an UnpackError, both inside a
kungfu Result.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from kungfu import Result

from .._errors import UnpackError
from ..pattern import BindingSpec

@dataclass(frozen=True, slots=True)
class Bindings[T]:
    """Values bound by a successful unpack."""

    spec: BindingSpec
    leading: tuple[T, ...]
    middle: typing.Any
    trailing: tuple[T, ...]

    def as_kwargs(self) -> dict[str, typing.Any]:
        """Declared name -> bound value. Wildcards and an anonymous middle are left out."""
        out: dict[str, typing.Any] = {}
        for slot, value in zip(self.spec.leading, self.leading):
            if slot.binds:
                out[slot.name] = value
        middle = self.spec.middle
        if middle is not None and middle.binds:
            out[typing.cast(str, middle.name)] = self.middle
        for slot, value in zip(self.spec.trailing, self.trailing):
            if slot.binds:
                out[slot.name] = value
        return out

    def values(self) -> tuple[typing.Any, ...]:
        """Bound values in declaration order, ready for tuple assignment."""
        return tuple(self.as_kwargs().values())

    def __getitem__(self, name: str) -> typing.Any:
        try:
            return self.as_kwargs()[name]
        except KeyError:
            raise KeyError(f"No slot named {name!r} in pattern {self.spec.names!r}") from None

type Outcome[T] = Result[Bindings[T], UnpackError]

__all__ = ("Bindings", "Outcome")
