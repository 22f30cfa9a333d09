# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the application intake API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    IntakeAPIException,
    intake_exception_handler,
    unexpected_exception_handler,
)
from app.routers import applications, health
from lib.email_client import SendGridClient

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

    - Startup: build the one email client shared by every request
    - Shutdown: close its connection pool
    """
    logger.info(f"Starting {settings.ORGANIZATION_NAME} Application API in {settings.ENVIRONMENT} mode")
    logger.info(f"Admin email: {settings.ADMIN_EMAIL}")

    app.state.email_client = SendGridClient(
        api_key=settings.SENDGRID_API_KEY,
        base_url=settings.SENDGRID_API_BASE,
        timeout=settings.EMAIL_TIMEOUT_SECONDS,
    )

    yield

    logger.info("Shutting down Application API")
    await app.state.email_client.aclose()


# Create FastAPI application
app = FastAPI(
    title=f"{settings.ORGANIZATION_NAME} Application API",
    description="""
## Application Intake API

Receives applications from the website form and emails them to the team.

1. **Admin notification** - every field, reply-to set to the applicant
2. **Applicant confirmation** - sent only after the admin notification succeeds
""",
    version=health.VERSION,
    lifespan=lifespan,
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(IntakeAPIException)
async def handle_intake_exception(request: Request, exc: IntakeAPIException):
    """Handle custom intake exceptions."""
    return await intake_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    applications.router,
    prefix="/api",
    tags=["Applications"]
)

app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "status": "online",
        "message": f"{settings.ORGANIZATION_NAME} Application API",
        "endpoints": ["POST /api/apply"],
    }


if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT)
