"""CompileResult — either a compiled query or every issue that rejected it."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from .exceptions import QueryValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .exceptions import QueryIssue
    from .pagination import PaginationParams
    from .predicates import CompiledFilter


def _empty_extras() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class CompileResult:
    """
    Outcome of compiling one request's query.

    Usage::

        result = compiler.compile(request.query_params)
        if not result:
            return bad_request(result.error.to_dict())
        rows = repository.find(result.filter, result.pagination)
    """

    filter: CompiledFilter | None = None
    pagination: PaginationParams | None = None
    issues: tuple[QueryIssue, ...] = ()
    extras: Mapping[str, str] = field(default_factory=_empty_extras)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def error(self) -> QueryValidationError | None:
        if self.is_valid:
            return None
        return QueryValidationError(self.issues)

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(
        cls,
        compiled: CompiledFilter,
        pagination: PaginationParams,
        extras: Mapping[str, str] | None = None,
    ) -> CompileResult:
        return cls(
            filter=compiled,
            pagination=pagination,
            extras=MappingProxyType(dict(extras or {})),
        )

    @classmethod
    def failure(cls, issues: tuple[QueryIssue, ...]) -> CompileResult:
        if not issues:
            raise ValueError("A failed result needs at least one issue")
        return cls(issues=tuple(issues))

    # ── Access ───────────────────────────────────────────────────

    def unwrap(self) -> tuple[CompiledFilter, PaginationParams]:
        """Return ``(filter, pagination)`` or raise ``QueryValidationError``."""
        if self.issues:
            raise QueryValidationError(self.issues)
        assert self.filter is not None and self.pagination is not None
        return self.filter, self.pagination

    def __bool__(self) -> bool:
        return self.is_valid
