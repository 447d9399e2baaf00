"""Exact decimal arithmetic for monetary amounts.

Receipt totals and item prices arrive as strings such as ``"6.49"``.
Binary floats cannot represent most of those values exactly, so the
points rules do all of their money arithmetic through the helpers in
this module. They operate on :class:`decimal.Decimal` values inside a
dedicated context whose precision is large enough that multiplication
and integer division never round.

The scale of a value (digits after the decimal point) is carried by the
``Decimal`` exponent: ``parse_decimal("2.00")`` has scale 2, ``mul``
adds the operand scales, and ``floor``/``ceil`` return scale 0.
"""

from __future__ import annotations

import re
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_CEILING,
    ROUND_FLOOR,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
)

_DECIMAL_LITERAL = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")

_EXACT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero],
)

_ONE = Decimal(1)


class InvalidDecimalError(ValueError):
    """Raised when a string is not a plain decimal literal."""


def parse_decimal(value: str) -> Decimal:
    """Parse ``value`` into an exact :class:`Decimal`.

    Only an optional sign, a digit sequence and an optional fractional
    part are accepted. Exponents, ``NaN``/``Infinity``, surrounding
    whitespace and non-string input are rejected.
    """
    if not isinstance(value, str) or _DECIMAL_LITERAL.fullmatch(value) is None:
        raise InvalidDecimalError(f"invalid decimal literal: {value!r}")
    return Decimal(value)


def floor(value: Decimal) -> Decimal:
    """Greatest integer <= ``value``, with scale 0."""
    return value.quantize(_ONE, rounding=ROUND_FLOOR, context=_EXACT)


def ceil(value: Decimal) -> Decimal:
    """Least integer >= ``value``, with scale 0."""
    return value.quantize(_ONE, rounding=ROUND_CEILING, context=_EXACT)


def equals(a: Decimal, b: Decimal) -> bool:
    # Decimal comparison ignores scale: Decimal("2.00") == Decimal("2")
    return a == b


def mul(a: Decimal, b: Decimal) -> Decimal:
    return _EXACT.multiply(a, b)


def mod(a: Decimal, b: Decimal) -> Decimal:
    """Floored modulo ``a - b * floor(a / b)``.

    ``Decimal.__mod__`` truncates toward zero, so the quotient is
    adjusted when the signs differ and the division is inexact.
    """
    quotient, remainder = _EXACT.divmod(a, b)
    if not remainder.is_zero() and (remainder < 0) != (b < 0):
        quotient = _EXACT.subtract(quotient, _ONE)
    return _EXACT.subtract(a, _EXACT.multiply(b, quotient))


def is_zero(value: Decimal) -> bool:
    return value.is_zero()


def int_part(value: Decimal) -> int:
    """Integer part of ``value`` truncated toward zero."""
    return int(value)


__all__ = [
    "InvalidDecimalError",
    "parse_decimal",
    "floor",
    "ceil",
    "equals",
    "mul",
    "mod",
    "is_zero",
    "int_part",
]
