"""Rule engine computing the points awarded for a receipt.

A receipt's score is the sum of independent rule contributions. Each
rule is a small evaluator that inspects a :class:`Receipt` and returns
a tuple of the points it awards and a textual reasoning, mirroring how
an auditor would explain the score line by line.

Supported rules (see :class:`receipt_processor.models.enums.PointsRule`):

* ``retailer_name`` – one point per ASCII letter or digit in the
  retailer name.
* ``round_dollar_total`` – 50 points if the total has no cents.
* ``quarter_multiple_total`` – 25 points if the total is a multiple of
  ``0.25``.
* ``item_pairs`` – 5 points for every two items.
* ``item_description`` – for each item whose trimmed description length
  is a positive multiple of 3, ``ceil(price * 0.2)`` points.
* ``odd_purchase_day`` – 6 points if the day of the month is odd.
* ``afternoon_purchase`` – 10 points if the purchase happened after
  14:00 and before 16:00.

All money arithmetic goes through :mod:`receipt_processor.utils.decimals`.
Values that cannot be parsed never raise: a bad total skips the two
total rules, a bad item price skips that item, and a bad purchase
timestamp is evaluated as ``0001-01-01 00:00``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

from receipt_processor.models.enums import PointsRule
from receipt_processor.models.schemas import Receipt
from receipt_processor.utils import decimals
from receipt_processor.utils.helpers import parse_purchase_datetime, strip_non_alphanumeric_chars

logger = logging.getLogger(__name__)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTER = Decimal("0.25")
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")

RuleResult = Tuple[int, str]


def _parse_total(receipt: Receipt) -> Optional[Decimal]:
    try:
        return decimals.parse_decimal(receipt.total)
    except decimals.InvalidDecimalError:
        return None


def _evaluate_retailer_name(receipt: Receipt) -> RuleResult:
    alphanumerics = strip_non_alphanumeric_chars(receipt.retailer)
    return len(alphanumerics), f"retailer {alphanumerics!r} has {len(alphanumerics)} alphanumerics"


def _evaluate_round_dollar_total(receipt: Receipt) -> RuleResult:
    total = _parse_total(receipt)
    if total is None:
        return 0, f"invalid total {receipt.total!r}"
    if decimals.equals(total, decimals.floor(total)):
        return ROUND_DOLLAR_POINTS, f"total {total} is a round dollar amount"
    return 0, f"total {total} has cents"


def _evaluate_quarter_multiple_total(receipt: Receipt) -> RuleResult:
    total = _parse_total(receipt)
    if total is None:
        return 0, f"invalid total {receipt.total!r}"
    if decimals.is_zero(decimals.mod(total, QUARTER)):
        return QUARTER_MULTIPLE_POINTS, f"total {total} is a multiple of {QUARTER}"
    return 0, f"total {total} is not a multiple of {QUARTER}"


def _evaluate_item_pairs(receipt: Receipt) -> RuleResult:
    pairs = len(receipt.items) // 2
    return pairs * ITEM_PAIR_POINTS, f"{len(receipt.items)} items make {pairs} pairs"


def _evaluate_item_description(receipt: Receipt) -> RuleResult:
    """Award points for items whose trimmed description length is a multiple of 3.

    Empty descriptions do not qualify. An item whose price cannot be
    parsed, or is negative, contributes nothing but does not stop the
    other items.
    """
    points = 0
    matched: List[str] = []
    for item in receipt.items:
        description = item.short_description.strip()
        if not description or len(description) % 3 != 0:
            continue
        try:
            price = decimals.parse_decimal(item.price)
        except decimals.InvalidDecimalError:
            logger.debug("Skipping item %r with invalid price %r", description, item.price)
            continue
        earned = decimals.int_part(decimals.ceil(decimals.mul(price, DESCRIPTION_PRICE_MULTIPLIER)))
        # negative prices earn 0
        earned = max(earned, 0)
        points += earned
        matched.append(f"{description!r}={earned}")
    return points, f"qualifying items {matched}"


def _evaluate_odd_purchase_day(receipt: Receipt) -> RuleResult:
    purchased_at = parse_purchase_datetime(receipt.purchase_date, receipt.purchase_time)
    if purchased_at.day % 2 == 1:
        return ODD_DAY_POINTS, f"day {purchased_at.day} is odd"
    return 0, f"day {purchased_at.day} is even"


def _evaluate_afternoon_purchase(receipt: Receipt) -> RuleResult:
    """Award points for purchases strictly after 14:00 and before 16:00."""
    purchased_at = parse_purchase_datetime(receipt.purchase_date, receipt.purchase_time)
    hour, minute = purchased_at.hour, purchased_at.minute
    in_window = (hour == 14 and minute > 0) or hour == 15
    clock = f"{hour:02d}:{minute:02d}"
    if in_window:
        return AFTERNOON_POINTS, f"{clock} is between 14:00 and 16:00"
    return 0, f"{clock} is outside 14:00-16:00"


HANDLERS: Dict[PointsRule, Callable[[Receipt], RuleResult]] = {
    PointsRule.RETAILER_NAME: _evaluate_retailer_name,
    PointsRule.ROUND_DOLLAR_TOTAL: _evaluate_round_dollar_total,
    PointsRule.QUARTER_MULTIPLE_TOTAL: _evaluate_quarter_multiple_total,
    PointsRule.ITEM_PAIRS: _evaluate_item_pairs,
    PointsRule.ITEM_DESCRIPTION: _evaluate_item_description,
    PointsRule.ODD_PURCHASE_DAY: _evaluate_odd_purchase_day,
    PointsRule.AFTERNOON_PURCHASE: _evaluate_afternoon_purchase,
}


def evaluate_rules(receipt: Receipt) -> Tuple[Dict[PointsRule, int], List[str]]:
    """Evaluate every points rule against a receipt.

    :param receipt: A parsed receipt.
    :returns: A tuple of (breakdown, reasons) where ``breakdown`` maps
        each rule to the points it contributed and ``reasons`` is a
        list of reasoning strings, one per rule.
    """
    breakdown: Dict[PointsRule, int] = {}
    reasons: List[str] = []
    for rule, handler in HANDLERS.items():
        points, reason = handler(receipt)
        breakdown[rule] = points
        reasons.append(f"{rule.value}: {reason} -> {points}")
    return breakdown, reasons


def calculate_points(receipt: Receipt) -> int:
    """Return the total points for ``receipt``; never negative."""
    breakdown, reasons = evaluate_rules(receipt)
    total = sum(breakdown.values())
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Points for %r: %d (%s)", receipt.retailer, total, "; ".join(reasons))
    return total
