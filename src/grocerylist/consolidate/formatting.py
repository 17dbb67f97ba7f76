"""Human-readable rendering of merged ingredients."""

from grocerylist.consolidate.records import MergedIngredient


def format_quantity(quantity: float) -> str:
    """Round to two decimals and drop trailing zeros: 2.0 -> "2", 2.50 -> "2.5"."""
    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def format_ingredient(ingredient: MergedIngredient) -> str:
    """Render a merged ingredient as "<quantity> <unit> <name>"."""
    if not ingredient.quantity:
        return ingredient.name

    quantity = format_quantity(ingredient.quantity)
    if ingredient.unit:
        return f"{quantity} {ingredient.unit} {ingredient.name}"
    return f"{quantity} {ingredient.name}"
