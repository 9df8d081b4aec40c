"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio import __version__
from portfolio.api import contact, projects, skills
from portfolio.api.errors import register_exception_handlers
from portfolio.config import get_settings
from portfolio.storage import build_storage

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.getLogger("portfolio").setLevel(settings.log_level.upper())
    # The storage lives as long as the application
    app.state.storage = build_storage(settings)
    logger.info(f"Portfolio API started ({settings.environment})")
    yield


app = FastAPI(
    title="Portfolio API",
    description="Projects, skills and contact form for a personal portfolio site",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for the single-page app dev server
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Register routers
app.include_router(projects.router)
app.include_router(skills.router)
app.include_router(contact.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "storage": settings.storage_backend,
    }
