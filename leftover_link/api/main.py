"""
FastAPI main application for LeftoverLink.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from leftover_link.config import AppSettings, get_app_settings
from leftover_link.error_handling import ListingNotFoundError, ListingValidationError
from leftover_link.store import InMemoryListingStore

settings = get_app_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_store(app_settings: AppSettings) -> InMemoryListingStore:
    """Create the in-memory store, seeded if configured."""
    if app_settings.store.seed_sample_data:
        return InMemoryListingStore.with_sample_data(name=app_settings.store.name)
    return InMemoryListingStore(name=app_settings.store.name)


def create_app(
    app_settings: Optional[AppSettings] = None,
    store: Optional[InMemoryListingStore] = None
) -> FastAPI:
    """
    Build the API application.

    Args:
        app_settings: Settings to use (defaults to environment settings)
        store: Listing store to serve (defaults to a fresh one per settings)
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        # Startup
        logger.info(f"Starting {app_settings.api.title}...")
        if getattr(app.state, "store", None) is None:
            app.state.store = build_store(app_settings)
        logger.info(f"Store ready with {len(app.state.store)} listings")

        yield

        # Shutdown; memory-only, everything is discarded
        logger.info(f"Shutting down {app_settings.api.title}...")

    app = FastAPI(
        title=app_settings.api.title,
        description="Post and browse leftover food listings",
        version=app_settings.api.version,
        lifespan=lifespan
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.api.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ListingValidationError)
    async def validation_error_handler(request: Request, exc: ListingValidationError):
        logger.info(f"Rejected listing: {exc.message}")
        return JSONResponse(status_code=422, content={"detail": exc.message, "field": exc.field})

    @app.exception_handler(ListingNotFoundError)
    async def not_found_handler(request: Request, exc: ListingNotFoundError):
        return JSONResponse(status_code=404, content={"detail": "Listing not found"})

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "version": app_settings.api.version
        }

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": app_settings.api.title,
            "docs": "/docs",
            "health": "/health",
            "listings": "/api/listings"
        }

    # Import and include routers
    from leftover_link.api.routers import listings

    app.include_router(listings.router, prefix="/api", tags=["listings"])

    return app


app = create_app()
