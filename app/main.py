# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the PreDelivery API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   predelivery-api            (console script, binds API_HOST:API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.exceptions import (
    PreDeliveryException,
    predelivery_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.layout import STATIC_DIR
from app.routers import admin_users, health, pages, upload

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on the first lookup, so startup
    only reports configuration.
    """
    logger.info(f"Starting {settings.APP_NAME} API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
        logger.warning("SUPABASE_URL or SUPABASE_SERVICE_KEY is not set; user checks will fail")

    yield

    logger.info(f"Shutting down {settings.APP_NAME} API")


# Create FastAPI application
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="""
## PreDelivery App API

Backend routes for the PreDelivery inspection app.

| Area | Endpoints |
|------|-----------|
| **Admin** | Check whether an email or phone number is already registered |
| **Upload** | Diagnostics for the upload route |
| **Health** | Liveness and readiness probes |

### Quick Start

```bash
curl "http://localhost:8000/api/admin/users/check-email?email=jane@example.com"
# {"success": true, "exists": false}
```
""",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Admin",
            "description": "User checks for the admin dashboard",
        },
        {
            "name": "Upload",
            "description": "Upload route diagnostics",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PreDeliveryException)
async def handle_predelivery_exception(request: Request, exc: PreDeliveryException):
    """Handle custom PreDelivery exceptions."""
    return await predelivery_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Admin user checks
app.include_router(
    admin_users.router,
    prefix="/api/admin/users",
    tags=["Admin"]
)

# Upload diagnostics
app.include_router(
    upload.router,
    prefix="/api/upload",
    tags=["Upload"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# HTML pages (wrapped by the root layout)
app.include_router(pages.router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# =============================================================================
# API Info
# =============================================================================

@app.get("/api", tags=["Root"])
async def api_info():
    """
    Returns API info.
    """
    return {
        "name": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
