from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add backend folder to sys.path so `import receipt_processor...` works in tests when running from backend root
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from receipt_processor.models.schemas import Receipt  # noqa: E402


def make_receipt(**overrides) -> Receipt:
    """Build a receipt from wire-format fields, defaulting to the sample receipt."""
    payload = {
        "retailer": "test retailer",
        "purchaseDate": "2023-10-07",
        "purchaseTime": "15:00",
        "items": [
            {"shortDescription": "test description", "price": "1.00"},
            {"shortDescription": "test description", "price": "1.00"},
        ],
        "total": "2.00",
    }
    payload.update(overrides)
    return Receipt.model_validate(payload)


@pytest.fixture
def receipt_factory():
    return make_receipt
