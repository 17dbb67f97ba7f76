"""API routers for the grocerylist application."""

from grocerylist.routers.grocery_list import router as grocery_list_router

__all__ = [
    "grocery_list_router",
]
