from .slot import WILDCARD, Declaration, Rest, Slot, parse_declaration
from .spec import BindingSpec, pattern

__all__ = (
    "BindingSpec",
    "Declaration",
    "Rest",
    "Slot",
    "WILDCARD",
    "parse_declaration",
    "pattern",
)
