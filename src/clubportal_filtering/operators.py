from __future__ import annotations

from enum import Enum


class FilterOperator(str, Enum):
    """Comparison operators accepted in list/search query keys."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"

    @property
    def is_range(self) -> bool:
        return self in _RANGE_OPERATORS


_RANGE_OPERATORS = frozenset(
    {
        FilterOperator.GT,
        FilterOperator.GTE,
        FilterOperator.LT,
        FilterOperator.LTE,
    }
)

# Suffixes recognised after the last underscore of a query key.
# ``eq`` is implicit and therefore never a suffix.
OPERATOR_SUFFIXES: frozenset[str] = frozenset(
    op.value for op in FilterOperator if op is not FilterOperator.EQ
)
