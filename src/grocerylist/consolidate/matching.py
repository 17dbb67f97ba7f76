"""Deciding when two records are the same item, and which name to keep."""

from grocerylist.consolidate.records import IngredientRecord
from grocerylist.normalize.names import has_parenthetical, normalize_name, strip_parentheticals


def are_same_item(a: IngredientRecord, b: IngredientRecord) -> bool:
    """
    Check whether two records denote the same grocery item.

    Only names are compared. Unit compatibility is part of the aggregation
    key, so "2 cups rice" and "500 g rice" match here but are never merged.
    """
    return normalize_name(a.name) == normalize_name(b.name)


def choose_best_name(a: str, b: str) -> str:
    """
    Choose the more useful grocery-list label of two candidate names.

    Priority:
    1. A name without a parenthetical qualifier beats one with it.
    2. The shorter name once parentheticals are stripped, `a` on ties.
    """
    a_qualified = has_parenthetical(a)
    b_qualified = has_parenthetical(b)
    if a_qualified != b_qualified:
        return b if a_qualified else a

    if len(strip_parentheticals(b)) < len(strip_parentheticals(a)):
        return b
    return a
