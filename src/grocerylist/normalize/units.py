"""Unit normalization for ingredient matching.

Units are canonicalized for grouping only. No conversion between units is
performed: "1 cup" and "250 ml" stay distinct.
"""

# =============================================================================
# Unit Alias Table
# =============================================================================

# (alias, canonical) pairs in declaration order.
UNIT_ALIASES: tuple[tuple[str, str], ...] = (
    # Volume
    ("tablespoon", "tbsp"),
    ("tablespoons", "tbsp"),
    ("tbsp", "tbsp"),
    ("tbs", "tbsp"),
    ("teaspoon", "tsp"),
    ("teaspoons", "tsp"),
    ("tsp", "tsp"),
    ("milliliter", "ml"),
    ("milliliters", "ml"),
    ("millilitre", "ml"),
    ("millilitres", "ml"),
    ("ml", "ml"),
    ("liter", "l"),
    ("liters", "l"),
    ("litre", "l"),
    ("litres", "l"),
    ("l", "l"),
    ("cup", "cup"),
    ("cups", "cup"),
    # Weight
    ("gram", "g"),
    ("grams", "g"),
    ("g", "g"),
    ("kilogram", "kg"),
    ("kilograms", "kg"),
    ("kg", "kg"),
    ("ounce", "oz"),
    ("ounces", "oz"),
    ("oz", "oz"),
    ("pound", "lb"),
    ("pounds", "lb"),
    ("lbs", "lb"),
    ("lb", "lb"),
    # Count-like
    ("pinch", "pinch"),
    ("pinches", "pinch"),
    ("clove", "cloves"),
    ("cloves", "cloves"),
)

_UNIT_LOOKUP: dict[str, str] = dict(UNIT_ALIASES)


def normalize_unit(raw: str | None) -> str:
    """
    Canonicalize a unit string into a matching key.

    Empty or missing units map to "". Known aliases map to their canonical
    abbreviation; anything else is returned lower-cased and trimmed.
    """
    if not raw:
        return ""

    unit = raw.lower().strip()
    return _UNIT_LOOKUP.get(unit, unit)
