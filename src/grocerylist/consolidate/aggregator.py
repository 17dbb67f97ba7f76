"""Fold ingredient records into merged, quantity-summed groups."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from grocerylist.consolidate.matching import are_same_item, choose_best_name
from grocerylist.consolidate.records import IngredientRecord, MergedIngredient
from grocerylist.logging_config import get_logger
from grocerylist.normalize.units import normalize_unit

logger = get_logger(__name__)


@dataclass
class _Group:
    """A merged ingredient plus the records that contributed to it."""

    representative: IngredientRecord
    merged: MergedIngredient
    members: list[IngredientRecord] = field(default_factory=list)

    def absorb(self, record: IngredientRecord) -> None:
        current = self.merged.quantity
        if current is not None and record.quantity is not None:
            self.merged.quantity = current + record.quantity
        elif current is None and record.quantity is not None:
            self.merged.quantity = record.quantity
        # otherwise an unspecified amount leaves the running sum alone

        self.merged.name = choose_best_name(self.merged.name, record.name)
        self.members.append(record)


def _fold(records: Iterable[IngredientRecord]) -> list[_Group]:
    groups: list[_Group] = []

    for record in records:
        if not record.is_well_formed:
            logger.warning(f"Skipping ingredient record without a name: {record!r}")
            continue

        unit_key = normalize_unit(record.unit)
        match = next(
            (
                g
                for g in groups
                if g.merged.unit == unit_key and are_same_item(g.representative, record)
            ),
            None,
        )

        if match is None:
            groups.append(
                _Group(
                    representative=record,
                    merged=MergedIngredient(
                        name=record.name, quantity=record.quantity, unit=unit_key
                    ),
                    members=[record],
                )
            )
        else:
            logger.debug(f"Merging {record.name!r} into {match.merged.name!r} ({unit_key or '-'})")
            match.absorb(record)

    return groups


def consolidate(records: Iterable[IngredientRecord]) -> list[MergedIngredient]:
    """
    Merge duplicate ingredients into one entry per (name key, unit key).

    Args:
        records: Ingredient records in encounter order.

    Returns:
        Merged ingredients in first-encounter order. Records without a
        name are skipped.
    """
    return [g.merged for g in _fold(records)]


def consolidate_with_members(
    records: Iterable[IngredientRecord],
) -> list[tuple[MergedIngredient, list[IngredientRecord]]]:
    """Like consolidate(), but also return the records behind each entry."""
    return [(g.merged, g.members) for g in _fold(records)]
