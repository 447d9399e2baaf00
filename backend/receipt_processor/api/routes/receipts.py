"""API routes for receipt submission and points lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from receipt_processor.api.dependencies import get_store
from receipt_processor.core.observability import sentry_breadcrumb
from receipt_processor.models.schemas import PointsResponse, Receipt, ReceiptIdResponse
from receipt_processor.services.receipt_store import ReceiptStore

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post(
    "/process",
    response_model=ReceiptIdResponse,
    responses={400: {"description": "The receipt is invalid"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": Receipt.model_json_schema()}},
            "required": True,
        },
    },
)
async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
    """Store a receipt and return the id it can be scored under.

    The body is parsed as JSON whatever ``Content-Type`` the client sent.
    """
    body = await request.body()
    try:
        receipt = Receipt.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(), body=body) from exc
    receipt_id = store.store(receipt)
    sentry_breadcrumb("receipts", "receipt stored", data={"receipt_id": receipt_id})
    return ReceiptIdResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    responses={400: {"description": "No receipt found for that id"}},
)
async def get_receipt_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    """Return the points awarded for a previously stored receipt."""
    points = store.score_by_id(receipt_id)
    sentry_breadcrumb("receipts", "receipt scored", data={"receipt_id": receipt_id, "points": points})
    return PointsResponse(points=points)
