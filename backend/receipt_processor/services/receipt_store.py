"""In-memory receipt registry and points cache.

Usage guidelines:
- Receipts are never mutated or deleted; entries live as long as the process.
- The points cache only memoizes ``calculate_points``; because the score is a
  pure function of the stored receipt, cached values never need refreshing.
- Each mapping has its own lock so concurrent handlers never observe a
  partially inserted entry. The first write of a score wins.
"""
from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional

from receipt_processor.core.config import settings
from receipt_processor.models.schemas import Receipt
from receipt_processor.services.points_calculator import calculate_points

logger = logging.getLogger(__name__)


class ReceiptNotFoundError(KeyError):
    """Raised when no receipt is stored under the requested id."""

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id


def generate_receipt_id() -> str:
    """Return a fresh version-4 UUID in canonical 8-4-4-4-12 form."""
    return str(uuid.uuid4())


class ReceiptStore:
    """Thread-safe registry of receipts with an optional points cache."""

    def __init__(self, cache_points: bool = True):
        self.cache_points = cache_points
        self._receipts: Dict[str, Receipt] = {}
        self._points: Dict[str, int] = {}
        self._receipts_lock = threading.Lock()
        self._points_lock = threading.Lock()

    def __len__(self) -> int:
        with self._receipts_lock:
            return len(self._receipts)

    def __contains__(self, receipt_id: object) -> bool:
        with self._receipts_lock:
            return receipt_id in self._receipts

    def store(self, receipt: Receipt) -> str:
        """Record ``receipt`` under a new id and return the id."""
        receipt_id = generate_receipt_id()
        with self._receipts_lock:
            # draw again on an id collision
            while receipt_id in self._receipts:
                receipt_id = generate_receipt_id()
            self._receipts[receipt_id] = receipt
        logger.info("Stored receipt %s", receipt_id)
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._receipts_lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def cached_points(self, receipt_id: str) -> Optional[int]:
        with self._points_lock:
            return self._points.get(receipt_id)

    def score_by_id(self, receipt_id: str) -> int:
        """Return the points for a stored receipt, computing them at most once.

        :raises ReceiptNotFoundError: if ``receipt_id`` was never stored.
        """
        cached = self.cached_points(receipt_id) if self.cache_points else None
        if cached is not None:
            logger.debug("Points cache hit for %s", receipt_id)
            return cached

        receipt = self.get(receipt_id)
        points = calculate_points(receipt)
        if self.cache_points:
            with self._points_lock:
                points = self._points.setdefault(receipt_id, points)
        logger.info("Computed %d points for receipt %s", points, receipt_id)
        return points


_store: Optional[ReceiptStore] = None
_store_lock = threading.Lock()


def get_receipt_store() -> ReceiptStore:
    """Return the process-wide store, creating it on first use."""
    global _store
    if _store is not None:
        return _store
    with _store_lock:
        if _store is None:
            _store = ReceiptStore(cache_points=settings.POINTS_CACHE_ENABLED)
    return _store
