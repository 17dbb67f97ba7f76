"""Normalize ingredient names and units into matching keys."""

from grocerylist.normalize.names import (
    NAME_SYNONYMS,
    has_parenthetical,
    normalize_name,
    strip_parentheticals,
)
from grocerylist.normalize.units import UNIT_ALIASES, normalize_unit

__all__ = [
    "NAME_SYNONYMS",
    "UNIT_ALIASES",
    "has_parenthetical",
    "normalize_name",
    "normalize_unit",
    "strip_parentheticals",
]
