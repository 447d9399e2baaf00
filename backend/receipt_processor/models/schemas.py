"""Pydantic schemas for request and response models.

Pydantic models validate the data that crosses the boundary of the
API. Field names are snake_case in Python and camelCase on the wire
(``purchaseDate``, ``shortDescription`` ...); both spellings are
accepted on input.

Receipts are frozen once parsed: the store hands out the same object
to every reader, so nothing may mutate it after insertion. Monetary
amounts, dates and times stay strings here and are interpreted by the
points calculator, which tolerates values it cannot parse.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


_WIRE_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    extra="ignore",
)


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = _WIRE_CONFIG

    short_description: str = Field(alias="shortDescription", examples=["Mountain Dew 12PK"])
    price: str = Field(examples=["6.49"])


class Receipt(BaseModel):
    """A submitted shopping receipt."""

    model_config = _WIRE_CONFIG

    retailer: str = Field(examples=["M&M Corner Market"])
    purchase_date: str = Field(alias="purchaseDate", examples=["2022-01-01"])
    purchase_time: str = Field(alias="purchaseTime", examples=["13:01"])
    items: Tuple[Item, ...]
    total: str = Field(examples=["6.49"])


# ---------------------------------------------------------------------------
# API response schemas


class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class HealthResponse(BaseModel):
    status: str
    environment: str
    version: str
    receipts: int
