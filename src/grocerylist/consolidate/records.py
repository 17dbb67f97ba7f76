"""Ingredient records flowing into and out of consolidation."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


def coerce_quantity(value: Any) -> float | None:
    """
    Coerce a raw quantity into a number, or None when it carries no amount.

    Handles formats like:
    - 2, 1.5
    - "1.5"
    - None, "", "to taste", "nan", "inf" -> None
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None

    try:
        parsed = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        logger.debug(f"Non-numeric quantity treated as unspecified: {value!r}")
        return None

    if not math.isfinite(parsed):
        logger.debug(f"Non-finite quantity treated as unspecified: {value!r}")
        return None
    return parsed


@dataclass(frozen=True)
class IngredientRecord:
    """One raw ingredient line item from a recipe."""

    name: str
    quantity: float | None = None
    unit: str = ""

    @property
    def is_well_formed(self) -> bool:
        """Check that the record has a usable display name."""
        return isinstance(self.name, str) and bool(self.name.strip())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IngredientRecord":
        """Build a record from a {name, quantity, unit} mapping."""
        name = data.get("name")
        unit = data.get("unit")
        return cls(
            name=name if isinstance(name, str) else "",
            quantity=coerce_quantity(data.get("quantity")),
            unit="" if unit is None else str(unit),
        )


@dataclass
class MergedIngredient:
    """One or more ingredient records judged to be the same grocery item."""

    name: str
    quantity: float | None
    unit: str

    def to_record(self) -> IngredientRecord:
        """Feed a merged ingredient back in as a unit-tagged record."""
        return IngredientRecord(name=self.name, quantity=self.quantity, unit=self.unit)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}


def records_from_recipes(recipes: Iterable[Mapping[str, Any]]) -> list[IngredientRecord]:
    """
    Flatten recipes into one ordered sequence of ingredient records.

    Args:
        recipes: Recipe mappings with an "ingredients" list of
            {name, quantity, unit} mappings.

    Returns:
        Records in recipe order, then line order.
    """
    records: list[IngredientRecord] = []
    for recipe in recipes:
        ingredients = recipe.get("ingredients") or []
        if not ingredients:
            logger.debug(f"Recipe {recipe.get('id', '?')} has no ingredients, skipping")
            continue
        records.extend(IngredientRecord.from_dict(ing) for ing in ingredients)
    return records
