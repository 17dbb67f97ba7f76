"""Ingredient consolidation: merge, name, format and sort grocery items."""

from grocerylist.consolidate.aggregator import consolidate, consolidate_with_members
from grocerylist.consolidate.formatting import format_ingredient, format_quantity
from grocerylist.consolidate.grocery_list import (
    ConsolidationSession,
    GroceryList,
    SessionState,
    build_grocery_list,
    replace_grocery_list,
    sort_ingredients,
)
from grocerylist.consolidate.matching import are_same_item, choose_best_name
from grocerylist.consolidate.records import (
    IngredientRecord,
    MergedIngredient,
    coerce_quantity,
    records_from_recipes,
)

__all__ = [
    "ConsolidationSession",
    "GroceryList",
    "IngredientRecord",
    "MergedIngredient",
    "SessionState",
    "are_same_item",
    "build_grocery_list",
    "choose_best_name",
    "coerce_quantity",
    "consolidate",
    "consolidate_with_members",
    "format_ingredient",
    "format_quantity",
    "records_from_recipes",
    "replace_grocery_list",
    "sort_ingredients",
]
