"""Command-line interface for building a grocery list from recipe files.

Each file holds one recipe or a list of recipes, where a recipe looks like:

    {"id": 1, "name": "Sambar", "ingredients": [{"name": "Toor Dal", "quantity": 1, "unit": "cup"}]}

Run with: grocerylist recipes/*.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from grocerylist.config import get_settings
from grocerylist.consolidate.grocery_list import ConsolidationSession, GroceryList
from grocerylist.consolidate.records import records_from_recipes
from grocerylist.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def load_recipes(paths: list[Path]) -> list[dict[str, Any]]:
    """Read recipes from JSON files, in file order."""
    recipes: list[dict[str, Any]] = []
    for path in paths:
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            recipes.append(data)
        elif isinstance(data, list):
            recipes.extend(item for item in data if isinstance(item, dict))
        else:
            raise ValueError(f"{path}: expected a recipe object or a list of recipes")
    return recipes


def render(grocery_list: GroceryList, as_json: bool) -> str:
    if as_json:
        return json.dumps([item.to_dict() for item in grocery_list.items], indent=2)
    return "\n".join(grocery_list.lines)


async def _enhance(session: ConsolidationSession) -> GroceryList:
    try:
        return await session.enhance()
    finally:
        await session.aclose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grocerylist",
        description="Consolidate recipe ingredients into one grocery list",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Recipe JSON files")
    parser.add_argument("--json", action="store_true", help="Print items as JSON")
    parser.add_argument(
        "--enhance",
        action="store_true",
        help="Ask the remote consolidation service to improve the list",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(log_level=args.log_level or settings.log_level, json_format=False)

    try:
        recipes = load_recipes(args.files)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    recipe_ids = [str(r["id"]) for r in recipes if r.get("id") is not None]
    session = ConsolidationSession(
        records_from_recipes(recipes),
        recipe_ids=recipe_ids,
        settings=settings,
    )
    grocery_list = session.consolidate()

    if args.enhance:
        grocery_list = asyncio.run(_enhance(session))
        if session.error is not None:
            print(f"warning: {session.error.message}", file=sys.stderr)
    else:
        session.close()

    output = render(grocery_list, args.json)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
