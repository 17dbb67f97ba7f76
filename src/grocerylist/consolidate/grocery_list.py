"""Grocery list building and the consolidation session state machine."""

import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Protocol

from grocerylist.config import Settings, get_settings
from grocerylist.connectors.enhancement import EnhancementConnector, IngredientPayload
from grocerylist.consolidate.aggregator import consolidate
from grocerylist.consolidate.formatting import format_ingredient
from grocerylist.consolidate.records import IngredientRecord, MergedIngredient
from grocerylist.errors import (
    EnhancementFailure,
    ErrorType,
    SessionClosedError,
    classify_error,
)
from grocerylist.logging_config import LoggingContext, get_logger

logger = get_logger(__name__)


def sort_ingredients(ingredients: Iterable[MergedIngredient]) -> list[MergedIngredient]:
    """Sort by display name, case-insensitive; ties keep encounter order."""
    return sorted(ingredients, key=lambda ing: ing.name.lower())


@dataclass
class GroceryList:
    """A sorted, consolidated grocery list."""

    items: list[MergedIngredient] = field(default_factory=list)
    source: Literal["local", "remote"] = "local"

    @property
    def lines(self) -> list[str]:
        """Formatted display strings, one per item."""
        return [format_ingredient(item) for item in self.items]

    def __len__(self) -> int:
        return len(self.items)


def build_grocery_list(records: Iterable[IngredientRecord]) -> GroceryList:
    """Consolidate records locally and sort the result."""
    records = list(records)
    items = sort_ingredients(consolidate(records))
    logger.info(f"Built grocery list: {len(records)} records -> {len(items)} items")
    return GroceryList(items=items, source="local")


def replace_grocery_list(ingredients: Iterable[MergedIngredient]) -> GroceryList:
    """Wrap an externally consolidated list, trusted as already merged."""
    return GroceryList(items=sort_ingredients(ingredients), source="remote")


class EnhancementClient(Protocol):
    """Anything that can consolidate recipes remotely."""

    async def get_consolidated_list(self, recipe_ids: list[str]) -> list[IngredientPayload]: ...


class SessionState(str, Enum):
    """Lifecycle of a consolidation session."""

    IDLE = "idle"
    CONSOLIDATING_LOCAL = "consolidating_local"
    CONSOLIDATING_REMOTE = "consolidating_remote"
    READY = "ready"
    CLOSED = "closed"


class ConsolidationSession:
    """
    Holds one grocery list while the user views it.

    The local list is rebuilt from scratch by consolidate(). enhance() asks the
    remote service for a replacement; at most one such request is in flight,
    and a failed request leaves the current list untouched.
    """

    def __init__(
        self,
        records: Sequence[IngredientRecord],
        recipe_ids: Sequence[str] = (),
        connector: EnhancementClient | None = None,
        settings: Settings | None = None,
    ):
        self.session_id = uuid.uuid4().hex
        self.records = list(records)
        self.recipe_ids = [str(rid) for rid in recipe_ids]
        self.settings = settings or get_settings()
        self._connector = connector
        self._owned_connector: EnhancementConnector | None = None
        self.state = SessionState.IDLE
        self.grocery_list = GroceryList()
        self.error: EnhancementFailure | None = None

    @property
    def is_enhancing(self) -> bool:
        return self.state is SessionState.CONSOLIDATING_REMOTE

    @property
    def is_closed(self) -> bool:
        return self.state is SessionState.CLOSED

    def _ensure_open(self) -> None:
        if self.is_closed:
            raise SessionClosedError(session_id=self.session_id)

    def _get_connector(self) -> EnhancementClient:
        if self._connector is None:
            self._owned_connector = EnhancementConnector(settings=self.settings)
            self._connector = self._owned_connector
        return self._connector

    def consolidate(self) -> GroceryList:
        """Build the local list from this session's records."""
        self._ensure_open()
        if self.is_enhancing:
            logger.warning("Remote consolidation in progress, keeping current list")
            return self.grocery_list

        with LoggingContext(session_id=self.session_id):
            self.state = SessionState.CONSOLIDATING_LOCAL
            self.grocery_list = build_grocery_list(self.records)
            self.error = None
            self.state = SessionState.READY
        return self.grocery_list

    def replace(self, ingredients: Iterable[MergedIngredient]) -> GroceryList:
        """Swap in an externally computed list, skipping local matching."""
        self._ensure_open()
        self.grocery_list = replace_grocery_list(ingredients)
        self.error = None
        self.state = SessionState.READY
        logger.info(f"Replaced grocery list with {len(self.grocery_list)} remote items")
        return self.grocery_list

    async def enhance(self) -> GroceryList:
        """
        Replace the list with the remote service's consolidation.

        Returns:
            The list now held by the session: the remote one on success, the
            previous one on failure (with `error` set).
        """
        self._ensure_open()
        if self.is_enhancing:
            logger.warning("Remote consolidation already pending, not issuing another request")
            return self.grocery_list

        if not self.settings.ai_features_enabled:
            self.error = EnhancementFailure.of(ErrorType.DISABLED)
            logger.warning("Remote consolidation requested but AI features are disabled")
            return self.grocery_list

        previous_state = self.state
        self.state = SessionState.CONSOLIDATING_REMOTE
        self.error = None

        with LoggingContext(session_id=self.session_id):
            try:
                payloads = await self._get_connector().get_consolidated_list(self.recipe_ids)
            except Exception as e:
                if self.is_closed:
                    logger.info("Session closed during remote consolidation, discarding failure")
                    return self.grocery_list
                self.error = classify_error(e)
                self.state = previous_state
                logger.warning(f"Remote consolidation failed ({self.error.error_type.value}): {e}")
                return self.grocery_list

            if self.is_closed:
                logger.info("Session closed during remote consolidation, discarding result")
                return self.grocery_list

            return self.replace(
                MergedIngredient(name=p.name, quantity=p.quantity, unit=p.unit or "")
                for p in payloads
            )

    def close(self) -> None:
        """Close the session; a pending remote result will be discarded."""
        self.state = SessionState.CLOSED

    async def aclose(self) -> None:
        """Close the session and release any connector it created itself."""
        self.close()
        if self._owned_connector is not None:
            await self._owned_connector.close()
            self._owned_connector = None
