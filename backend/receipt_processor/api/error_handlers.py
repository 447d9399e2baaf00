"""
Custom exception handlers for FastAPI.
Maps domain and validation errors onto the plain-text responses clients expect.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from receipt_processor.core.config import settings
from receipt_processor.core.observability import sentry_capture
from receipt_processor.services.receipt_store import ReceiptNotFoundError

logger = logging.getLogger(__name__)

INVALID_RECEIPT_MESSAGE = "The receipt is invalid"
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that id"


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected receipt on %s: %d validation error(s)", request.url.path, len(exc.errors()))
    return PlainTextResponse(INVALID_RECEIPT_MESSAGE, status_code=HTTP_400_BAD_REQUEST)


def receipt_not_found_handler(request: Request, exc: ReceiptNotFoundError):
    logger.warning("No receipt found for id %s", exc.receipt_id)
    return PlainTextResponse(RECEIPT_NOT_FOUND_MESSAGE, status_code=HTTP_400_BAD_REQUEST)


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    sentry_capture(exc)
    content = {"error": "Internal server error"}
    # exception text is returned in development only
    if settings.is_development:
        content["details"] = str(exc)
    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=content)
