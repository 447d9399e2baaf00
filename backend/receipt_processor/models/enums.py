"""Enumeration types used throughout the receipt processor.

When adding a member to ``PointsRule`` register its evaluator in
:mod:`receipt_processor.services.points_calculator` as well.
"""

from enum import Enum


class PointsRule(str, Enum):
    """Independent rules whose contributions make up a receipt's points."""

    RETAILER_NAME = "retailer_name"
    ROUND_DOLLAR_TOTAL = "round_dollar_total"
    QUARTER_MULTIPLE_TOTAL = "quarter_multiple_total"
    ITEM_PAIRS = "item_pairs"
    ITEM_DESCRIPTION = "item_description"
    ODD_PURCHASE_DAY = "odd_purchase_day"
    AFTERNOON_PURCHASE = "afternoon_purchase"
