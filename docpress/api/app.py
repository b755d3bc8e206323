"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docpress import __version__
from docpress.api.routes import router as documents_router
from docpress.api.routes import wordpress_router
from docpress.store import DocumentStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application startup and shutdown."""
    logger.info("Starting docpress API...")
    yield
    logger.info(f"Shutting down docpress API ({len(app.state.store)} documents discarded)...")


def create_app(store: DocumentStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Document store to serve. A fresh in-memory store is
            created when not provided.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="docpress API",
        description=(
            "Turns drive documents into clean WordPress posts. Normalizes exported "
            "markup, extracts titles, derives metadata with an LLM, and publishes "
            "drafts or live posts through the WordPress REST API."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.store = store if store is not None else DocumentStore()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(documents_router)
    application.include_router(wordpress_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "docpress"}

    return application


app = create_app()
