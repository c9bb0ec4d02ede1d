"""
Notices FastAPI Application

Main entry point for the notices API.
Uses the generic common/ library for infrastructure and noticeboard/ for
business logic.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from common.database import MongoDB
from common.utils import success_response

from noticeboard.config import settings
from noticeboard.models import User
from noticeboard.dependencies import init_all_services
from noticeboard.error_handlers import register_error_handlers
from noticeboard.auth.router import router as auth_router
from noticeboard.user.router import router as user_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown tasks like database connections
    and service initialization.
    """
    logger.info("Starting notices API...")

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
        document_models=[User],
    )

    Path(settings.AVATARS_DIR).mkdir(parents=True, exist_ok=True)
    Path(settings.UPLOAD_TMP_DIR).mkdir(parents=True, exist_ok=True)

    init_all_services(db=main_db.db, settings=settings)
    logger.info("Notices API started successfully")

    yield

    logger.info("Shutting down notices API...")
    await main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Notices API",
    description="Users, sessions and favorite notices",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(user_router, prefix=API_PREFIX)

app.mount(
    "/avatars",
    StaticFiles(directory=settings.AVATARS_DIR, check_dir=False),
    name="avatars",
)


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and database connection.
    """
    return success_response({
        "status": "ok",
        "database": main_db.is_connected,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
