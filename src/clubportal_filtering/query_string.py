"""QueryStringBuilder — compiled filter + pagination -> query string (page links)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from .coercion import coerce_value
from .operators import FilterOperator
from .tokenizer import KeyToken, join_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .coercion import Scalar
    from .pagination import PaginationConfig, PaginationParams
    from .predicates import CompiledFilter


def _render_value(operator: FilterOperator, value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if operator is FilterOperator.LIKE:
        return value
    # EQ/NE strings are percent-decoded once more after the query string
    rendered = quote(value, safe="")
    decoded = coerce_value(operator, rendered)
    if type(decoded) is not str or decoded != value:
        # a string that reads as a number or boolean; escape its first char
        rendered = f"%{ord(value[0]):02X}" + quote(value[1:], safe="")
    return rendered


class QueryStringBuilder:
    """Build a query string that compiles back to the same filter."""

    def build(
        self,
        compiled: CompiledFilter | None = None,
        pagination: PaginationParams | None = None,
        *,
        extras: Mapping[str, str] | None = None,
        config: PaginationConfig | None = None,
    ) -> str:
        params: dict[str, str] = {}
        if compiled is not None:
            for p in compiled:
                key = join_key(KeyToken(p.attribute, p.operator))
                params[key] = _render_value(p.operator, p.value)
        if extras:
            params.update(extras)
        if pagination is not None:
            page_key = config.page_key if config else "page"
            limit_key = config.limit_key if config else "limit"
            params[page_key] = str(pagination.page)
            params[limit_key] = str(pagination.limit)
        return urlencode(params) if params else ""
