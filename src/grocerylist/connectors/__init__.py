"""Connectors for remote services the grocery list depends on."""

from grocerylist.connectors.base import ConnectorError, ConnectorResponse
from grocerylist.connectors.enhancement import (
    ConsolidatedListPayload,
    EnhancementConnector,
    IngredientPayload,
)

__all__ = [
    "ConnectorError",
    "ConnectorResponse",
    "ConsolidatedListPayload",
    "EnhancementConnector",
    "IngredientPayload",
]
