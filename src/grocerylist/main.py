"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grocerylist import __version__
from grocerylist.config import get_settings
from grocerylist.logging_config import configure_logging, get_logger
from grocerylist.routers import grocery_list_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
    title="Grocery List API",
    description="Consolidate ingredients from several recipes into one grocery list",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(grocery_list_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "grocerylist-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Grocery List API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
