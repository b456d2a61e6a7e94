"""Compiled filter -> MongoDB match document."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ..exceptions import FilterAdapterError
from ..operators import FilterOperator

if TYPE_CHECKING:
    from ..pagination import PaginationParams
    from ..predicates import CompiledFilter, Predicate

_MONGO_OP_MAP: dict[FilterOperator, str] = {
    FilterOperator.EQ: "$eq",
    FilterOperator.NE: "$ne",
    FilterOperator.GT: "$gt",
    FilterOperator.GTE: "$gte",
    FilterOperator.LT: "$lt",
    FilterOperator.LTE: "$lte",
}


def _compile_predicate(predicate: Predicate) -> dict[str, Any]:
    if predicate.operator is FilterOperator.LIKE:
        if not isinstance(predicate.value, str):
            raise FilterAdapterError(
                f"like on {predicate.attribute!r} requires a string value"
            )
        return {"$regex": re.escape(predicate.value), "$options": "i"}
    return {_MONGO_OP_MAP[predicate.operator]: predicate.value}


def _compile_group(group: tuple[Predicate, ...]) -> Any:
    if len(group) == 1 and group[0].operator is FilterOperator.EQ:
        return group[0].value
    merged: dict[str, Any] = {}
    for predicate in group:
        fragment = _compile_predicate(predicate)
        if merged.keys() & fragment.keys():
            raise FilterAdapterError(
                f"Duplicate {predicate.operator.value!r} bound "
                f"on {predicate.attribute!r}"
            )
        merged.update(fragment)
    return merged


class MongoFilterAdapter:
    """Builds ``find``/``$match`` documents and skip/limit for a compiled filter."""

    def build_match(self, compiled: CompiledFilter) -> dict[str, Any]:
        return {
            attribute: _compile_group(compiled.for_attribute(attribute))
            for attribute in compiled.attributes
        }

    def to_backend_query(
        self, compiled: CompiledFilter, pagination: PaginationParams
    ) -> dict[str, Any]:
        return {
            "filter": self.build_match(compiled),
            "skip": pagination.skip,
            "limit": pagination.take,
        }

    def build_pipeline(
        self, compiled: CompiledFilter, pagination: PaginationParams
    ) -> list[dict[str, Any]]:
        """Aggregation pipeline returning one page plus the total count."""
        return [
            {"$match": self.build_match(compiled)},
            {
                "$facet": {
                    "metadata": [
                        {"$count": "total"},
                        {
                            "$addFields": {
                                "page": pagination.page,
                                "limit": pagination.limit,
                            }
                        },
                    ],
                    "data": [
                        {"$skip": pagination.skip},
                        {"$limit": pagination.take},
                    ],
                }
            },
        ]
