"""Value coercion — raw query strings to typed predicate values."""

from __future__ import annotations

import math
import re
from urllib.parse import unquote

from .exceptions import ValueCoercionError
from .operators import FilterOperator

Scalar = bool | int | float | str

_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_number(raw: str) -> int | float | None:
    """
    Parse a finite decimal literal.

    Integral literals become ``int``, everything else ``float``.
    Returns ``None`` for anything that is not a plain number
    (``nan``, ``inf``, ``1_000``, hex, blank strings).
    """
    text = raw.strip()
    if not _NUMBER_PATTERN.match(text):
        return None
    if _INTEGER_PATTERN.match(text):
        try:
            return int(text)
        except ValueError:
            # longer than sys.get_int_max_str_digits()
            return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def coerce_value(operator: FilterOperator, raw: str) -> Scalar:
    """
    Convert a raw query value for *operator*.

    Raises:
        ValueCoercionError: A range operator received a non-numeric value.
    """
    if operator.is_range:
        number = parse_number(raw)
        if number is None:
            raise ValueCoercionError(raw, "number")
        return number

    if operator is FilterOperator.LIKE:
        return raw

    if operator is FilterOperator.EQ:
        if raw == "true":
            return True
        if raw == "false":
            return False

    number = parse_number(raw)
    if number is not None:
        return number
    return unquote(raw)


def coerce_positive_int(raw: str | None, default: int) -> int:
    """Parse a pagination value, falling back to *default*."""
    if raw is None:
        return default
    text = str(raw).strip()
    if not _INTEGER_PATTERN.match(text):
        return default
    try:
        value = int(text)
    except ValueError:
        return default
    return value if value >= 1 else default
