"""Entry point for the FastAPI application.

This module constructs the FastAPI app, includes all routers and sets
up startup and shutdown events. Run it with uvicorn::

    uvicorn receipt_processor.api.main:app --port 8080

or through the ``receipt-processor`` console script, which honours the
``HOST`` and ``PORT`` settings from ``receipt_processor.core.config``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from receipt_processor.api.endpoints.health import router as health_router
from receipt_processor.api.error_handlers import (
    generic_exception_handler,
    receipt_not_found_handler,
    validation_exception_handler,
)
from receipt_processor.api.routes.receipts import router as receipts_router
from receipt_processor.core.config import settings
from receipt_processor.core.observability import init_sentry
from receipt_processor.services.receipt_store import ReceiptNotFoundError

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info("Starting up %s (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    # Shutdown; receipts are kept in memory only and are discarded here
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

# CORS: allow all in development, otherwise only the configured origins
allow_origins = ["*"] if settings.is_development else list(settings.BACKEND_CORS_ORIGINS or [])

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register custom exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ReceiptNotFoundError, receipt_not_found_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(receipts_router)
app.include_router(health_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to the {settings.PROJECT_NAME} API"}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
