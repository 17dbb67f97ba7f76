"""API routes for building consolidated grocery lists."""

import uuid

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from grocerylist.config import Settings, get_settings
from grocerylist.connectors.enhancement import EnhancementConnector
from grocerylist.consolidate.formatting import format_ingredient
from grocerylist.consolidate.grocery_list import (
    ConsolidationSession,
    GroceryList,
    build_grocery_list,
)
from grocerylist.consolidate.records import IngredientRecord
from grocerylist.errors import ErrorType
from grocerylist.logging_config import LoggingContext, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["grocery-list"])


# Request/Response schemas
class IngredientIn(BaseModel):
    """One ingredient line item from a recipe."""

    name: str | None = None
    quantity: float | str | None = None
    unit: str | None = None


class GroceryListRequest(BaseModel):
    """Ingredients to consolidate, plus the recipes they came from."""

    ingredients: list[IngredientIn] = Field(default_factory=list)
    recipe_ids: list[str] = Field(default_factory=list)


class GroceryItemOut(BaseModel):
    """One consolidated grocery item."""

    name: str
    quantity: float | None
    unit: str
    display: str


class ErrorOut(BaseModel):
    """A failure surfaced to the caller without failing the request."""

    type: ErrorType
    message: str
    status_code: int | None = None


class GroceryListResponse(BaseModel):
    """A sorted grocery list."""

    items: list[GroceryItemOut]
    lines: list[str]
    source: str
    error: ErrorOut | None = None


def _to_records(request: GroceryListRequest) -> list[IngredientRecord]:
    return [IngredientRecord.from_dict(ing.model_dump()) for ing in request.ingredients]


def _to_response(grocery_list: GroceryList) -> GroceryListResponse:
    return GroceryListResponse(
        items=[
            GroceryItemOut(
                name=item.name,
                quantity=item.quantity,
                unit=item.unit,
                display=format_ingredient(item),
            )
            for item in grocery_list.items
        ],
        lines=grocery_list.lines,
        source=grocery_list.source,
    )


def get_enhancement_connector(
    settings: Settings = Depends(get_settings),
) -> EnhancementConnector:
    """Dependency providing the remote consolidation connector."""
    return EnhancementConnector(settings=settings)


@router.post("/grocery-list", response_model=GroceryListResponse)
async def create_grocery_list(request: GroceryListRequest) -> GroceryListResponse:
    """Consolidate ingredients locally into a sorted grocery list."""
    with LoggingContext(request_id=uuid.uuid4().hex):
        logger.info(f"Consolidating {len(request.ingredients)} ingredients")
        return _to_response(build_grocery_list(_to_records(request)))


@router.post("/grocery-list/enhanced", response_model=GroceryListResponse)
async def create_enhanced_grocery_list(
    request: GroceryListRequest,
    settings: Settings = Depends(get_settings),
    connector: EnhancementConnector = Depends(get_enhancement_connector),
) -> GroceryListResponse:
    """
    Consolidate locally, then ask the remote service for a better list.

    A failed remote call still returns 200 with the local list and `error` set.
    """
    with LoggingContext(request_id=uuid.uuid4().hex):
        session = ConsolidationSession(
            _to_records(request),
            recipe_ids=request.recipe_ids,
            connector=connector,
            settings=settings,
        )
        try:
            session.consolidate()
            grocery_list = await session.enhance()
        finally:
            session.close()
            await connector.close()

        response = _to_response(grocery_list)
        if session.error is not None:
            response.error = ErrorOut(
                type=session.error.error_type,
                message=session.error.message,
                status_code=session.error.status_code,
            )
        return response
