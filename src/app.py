"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route handlers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging_config import setup_logging
from config import (
    CORS_ALLOWED_ORIGINS,
    API_HOST,
    API_PORT,
)
from api.routes import auth, definitions, sdc_tracking, stats, users
from core.database import SessionLocal, init_db
from core.responses import register_exception_handlers
from utils.entities import ENTITY_TYPES
from utils.entity_store import EntityStore
from utils.user_manager import UserManager

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="MLS ProAdmin API",
    description="Backend API for tracking clinical-trial operational data.",
    version="1.0.0",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register route handlers
app.include_router(auth.router)
app.include_router(users.router)
for definition_router in definitions.routers:
    app.include_router(definition_router)
app.include_router(sdc_tracking.router)
app.include_router(stats.router)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create tables and seed every entity type plus the super admin."""
    init_db()
    seed_database()


def seed_database() -> None:
    """Insert built-in records into empty indexes.

    Safe to call repeatedly: types that already have records are skipped and
    the super admin is only recreated when missing.
    """
    db = SessionLocal()
    try:
        store = EntityStore(db)
        for entity_type in ENTITY_TYPES.values():
            store.ensure_seed(entity_type)
        UserManager(store).ensure_super_admin()
    finally:
        db.close()
    logger.info("Database ready")


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """Return API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": "MLS ProAdmin API",
        "version": "1.0.0",
        "description": "Backend API for tracking clinical-trial operational data.",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/api/health",
    }


@app.get("/api/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    server_url = f"http://{API_HOST}:{API_PORT}"
    logger.info("Starting MLS ProAdmin API at %s", server_url)
    logger.info("API docs: %s/docs", server_url)

    # reload=True enables auto-reload on code changes
    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
