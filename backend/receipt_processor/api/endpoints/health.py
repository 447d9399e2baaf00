"""Health check endpoint for monitoring."""
from fastapi import APIRouter, Depends

from receipt_processor.api.dependencies import get_store
from receipt_processor.core.config import settings
from receipt_processor.models.schemas import HealthResponse
from receipt_processor.services.receipt_store import ReceiptStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: ReceiptStore = Depends(get_store)) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        version=settings.VERSION,
        receipts=len(store),
    )
