"""Common dependencies for FastAPI routes.

Handlers receive the receipt store through ``Depends`` instead of
importing the module-level singleton, so tests can swap in a fresh
store with ``app.dependency_overrides``.
"""

from __future__ import annotations

from receipt_processor.services.receipt_store import ReceiptStore, get_receipt_store


def get_store() -> ReceiptStore:
    """Alias for `get_receipt_store` to be imported in routers."""
    return get_receipt_store()
