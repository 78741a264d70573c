"""Locale tolerant parsing and canonical formatting of money amounts.

Every amount typed into a calculator goes through :func:`parse_amount`, which
never fails: anything it cannot read becomes ``0``. Display strings come from
:func:`format_amount` and :func:`format_integer`, both of which round half away
from zero and never show a negative zero.
"""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

logger = logging.getLogger(__name__)

RawAmount = Union[str, float, int, None]

_DISALLOWED_CHARS = re.compile(r"[^0-9+\-.]")
_NUMERIC_PREFIX = re.compile(r"[+\-]?(?:\d+\.?\d*|\.\d+)")

_CENT = Decimal("0.01")
_UNIT = Decimal("1")


def _normalize_separators(text: str) -> str:
    """Turn whichever separator acts as the decimal point into '.'."""
    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            # 1.234,56
            return text.replace(".", "").replace(",", ".", 1)
        # 1,234.56
        return text.replace(",", "")
    if "," in text:
        return text.replace(".", "").replace(",", ".", 1)
    return text


def parse_amount(raw: RawAmount) -> float:
    """
    Parse a user entered amount into a float.

    Args:
        raw: Text as typed (``"1.234,56"``, ``"€ 12"``, ``"-5"``) or an
            already numeric value.

    Returns:
        float: The parsed amount, or 0.0 for empty, unparsable or
            non-finite input.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else 0.0

    text = str(raw).strip()
    if not text:
        return 0.0

    cleaned = _DISALLOWED_CHARS.sub("", _normalize_separators(text))
    match = _NUMERIC_PREFIX.match(cleaned)
    if not match:
        logger.debug(f"Unparsable amount {raw!r}, using 0")
        return 0.0

    value = float(match.group(0))
    if not math.isfinite(value):
        logger.debug(f"Non-finite amount {raw!r}, using 0")
        return 0.0
    return value


def _quantize(n: float, exp: Decimal) -> Decimal:
    # repr gives the shortest round-tripping text, so 1.005 stays 1.005
    value = Decimal(repr(float(n)))
    if not value.is_finite():
        # Same rule as parse_amount: inf and nan count as zero
        return Decimal(0).quantize(exp)
    with localcontext() as ctx:
        # Enough digits for the largest float at the requested exponent
        ctx.prec = max(ctx.prec, value.adjusted() - exp.as_tuple().exponent + 2)
        return value.quantize(exp, rounding=ROUND_HALF_UP)


def round_cents(n: float) -> float:
    """Round to the nearest cent, half away from zero."""
    return float(_quantize(n, _CENT)) + 0.0


def format_amount(n: float) -> str:
    """Render ``n`` with two decimals; ``-0.00`` becomes ``0.00``."""
    value = _quantize(n, _CENT)
    if value.is_zero():
        return "0.00"
    return f"{value:.2f}"


def format_integer(n: float) -> str:
    """Render ``n`` rounded to a whole number; ``-0`` becomes ``0``."""
    value = _quantize(n, _UNIT)
    if value.is_zero():
        return "0"
    return f"{value:.0f}"


def is_balanced(left: float, right: float) -> bool:
    """True when the two totals agree to the cent."""
    difference = (left - right) * 100
    if not math.isfinite(difference):
        return False
    return _quantize(difference, _UNIT).is_zero()
