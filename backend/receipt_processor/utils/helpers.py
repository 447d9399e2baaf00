"""Miscellaneous helper functions."""

from __future__ import annotations

import datetime as dt
import re

PURCHASE_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

# Zero-padded date; the hour may be a single digit, minutes may not.
_PURCHASE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_PURCHASE_TIME_PATTERN = re.compile(r"[0-9]{1,2}:[0-9]{2}")

# Value used for unparseable purchase timestamps: day 1, midnight.
ZERO_DATETIME = dt.datetime(1, 1, 1, 0, 0)


def _is_ascii_alphanumeric(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9")


def strip_non_alphanumeric_chars(value: str) -> str:
    """Return ``value`` with everything but ASCII letters and digits removed.

    Non-ASCII letters such as ``"é"`` are removed too, unlike with
    ``str.isalnum``.
    """
    return "".join(char for char in value if _is_ascii_alphanumeric(char))


def parse_purchase_datetime(purchase_date: str, purchase_time: str) -> dt.datetime:
    """Combine a ``YYYY-MM-DD`` date and an ``HH:MM`` time into a naive datetime.

    ``strptime`` alone accepts unpadded fields such as ``"2023-10-8"``;
    those are rejected here. Returns :data:`ZERO_DATETIME` if either part
    cannot be parsed, so callers never have to handle a failure.
    """
    if not (isinstance(purchase_date, str) and isinstance(purchase_time, str)):
        return ZERO_DATETIME
    if not (_PURCHASE_DATE_PATTERN.fullmatch(purchase_date) and _PURCHASE_TIME_PATTERN.fullmatch(purchase_time)):
        return ZERO_DATETIME
    try:
        return dt.datetime.strptime(f"{purchase_date} {purchase_time}", PURCHASE_DATETIME_FORMAT)
    except ValueError:
        return ZERO_DATETIME
