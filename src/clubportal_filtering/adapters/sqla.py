"""
Compiled filter -> SQLAlchemy ``Select``.

Attributes are resolved against the mapped model class; every predicate
becomes one boolean clause and all clauses are AND-ed. Pagination maps to
``OFFSET``/``LIMIT``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, select, true

from ..exceptions import FilterAdapterError
from ..operators import FilterOperator

if TYPE_CHECKING:
    from ..pagination import PaginationParams
    from ..predicates import CompiledFilter, Predicate


def _escape_like(value: str, escape: str = "\\") -> str:
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class SQLAlchemyFilterAdapter:
    """Applies compiled filters to statements over one mapped model."""

    def __init__(self, model: type[Any]) -> None:
        self._model = model

    def build_where(self, compiled: CompiledFilter) -> ColumnElement[bool]:
        clauses = [self._compile_predicate(p) for p in compiled]
        if not clauses:
            return true()
        return and_(*clauses)

    def apply(
        self,
        stmt: Select[Any],
        compiled: CompiledFilter,
        pagination: PaginationParams | None = None,
    ) -> Select[Any]:
        if not compiled.is_empty():
            stmt = stmt.where(self.build_where(compiled))
        if pagination is not None:
            stmt = stmt.offset(pagination.skip).limit(pagination.take)
        return stmt

    def to_backend_query(
        self, compiled: CompiledFilter, pagination: PaginationParams
    ) -> Select[Any]:
        return self.apply(select(self._model), compiled, pagination)

    def _column(self, attribute: str) -> Any:
        column = getattr(self._model, attribute, None)
        if column is None or not hasattr(column, "ilike"):
            raise FilterAdapterError(
                f"Field {attribute!r} is not a column of {self._model.__name__}"
            )
        return column

    def _compile_predicate(self, predicate: Predicate) -> ColumnElement[bool]:
        col = self._column(predicate.attribute)
        value = predicate.value
        op = predicate.operator
        if op is FilterOperator.EQ:
            return col == value
        if op is FilterOperator.NE:
            return col != value
        if op is FilterOperator.GT:
            return col > value
        if op is FilterOperator.GTE:
            return col >= value
        if op is FilterOperator.LT:
            return col < value
        if op is FilterOperator.LTE:
            return col <= value
        if op is FilterOperator.LIKE:
            return col.ilike(f"%{_escape_like(str(value))}%", escape="\\")
        raise FilterAdapterError(f"Unsupported operator {op!r}")
