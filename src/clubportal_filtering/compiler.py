"""
QueryCompiler — raw query parameters -> CompiledFilter + PaginationParams.

The compiler runs in fixed stages over the whole key set:

1. pagination keys and endpoint-reserved keys are set aside;
2. every remaining key is tokenized and checked against the ``FieldSpec``;
   all issues are collected and, if any, the request is rejected;
3. every value is coerced for its operator, again collecting all issues;
4. predicates are built into a single ``CompiledFilter``.

No stage stops at the first bad key, and nothing partial is ever returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .coercion import coerce_value
from .exceptions import IssueKind, QueryIssue, ValueCoercionError
from .pagination import PaginationExtractor
from .predicates import PredicateBuilder
from .result import CompileResult
from .tokenizer import split_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .tokenizer import KeyToken
    from .whitelist import FieldSpec

logger = logging.getLogger("clubportal.filtering.compiler")


class QueryCompiler:
    """Compiles request queries for one endpoint. Safe to share across requests."""

    def __init__(
        self,
        field_spec: FieldSpec,
        pagination: PaginationExtractor | None = None,
        *,
        name: str | None = None,
    ) -> None:
        """
        Initialize QueryCompiler.

        Args:
            field_spec: Whitelist of filterable attributes for the endpoint.
            pagination: Pagination extractor (defaults to ``page``/``limit``
                with defaults 1 and 10).
            name: Endpoint name, used in log records only.
        """
        if field_spec is None:
            raise ValueError("field_spec parameter is required")
        self._spec = field_spec
        self._pagination = pagination or PaginationExtractor()
        self._name = name or "anonymous"
        clash = self._pagination.keys & field_spec.attributes
        if clash:
            raise ValueError(
                f"Pagination keys used as filter attributes: {', '.join(sorted(clash))}"
            )
        self._reserved = self._pagination.keys | field_spec.reserved_keys

    @property
    def field_spec(self) -> FieldSpec:
        return self._spec

    @property
    def reserved_keys(self) -> frozenset[str]:
        return self._reserved

    def compile(self, raw: Mapping[str, str]) -> CompileResult:
        """Compile *raw* into a filter and pagination, or collect every issue."""
        pagination = self._pagination.extract(raw)
        extras = {
            k: v for k, v in raw.items() if k in self._spec.reserved_keys
        }
        candidates = {k: v for k, v in raw.items() if k not in self._reserved}

        tokens = {key: split_key(key) for key in candidates}

        issues = self._validate_all(tokens)
        if issues:
            return self._reject(issues)

        builder = PredicateBuilder()
        for key, token in tokens.items():
            try:
                value = coerce_value(token.operator, candidates[key])
            except ValueCoercionError as exc:
                issues.append(
                    QueryIssue(
                        key,
                        IssueKind.VALUE_COERCION_FAILURE,
                        f"{exc} for operator {token.operator.value!r}",
                    )
                )
                continue
            builder.add(token.attribute, token.operator, value)
        if issues:
            return self._reject(issues)

        compiled = builder.build()
        logger.debug(
            "Compiled %d predicate(s) for %s (page=%d, limit=%d)",
            len(compiled),
            self._name,
            pagination.page,
            pagination.limit,
        )
        return CompileResult.success(compiled, pagination, extras)

    def _validate_all(self, tokens: dict[str, KeyToken]) -> list[QueryIssue]:
        issues: list[QueryIssue] = []
        for key, token in tokens.items():
            problem = self._spec.check(token.attribute, token.operator)
            if problem is not None:
                kind, reason = problem
                issues.append(QueryIssue(key, kind, reason))
        return issues

    def _reject(self, issues: list[QueryIssue]) -> CompileResult:
        logger.info(
            "Rejected query for %s: %s",
            self._name,
            ", ".join(issue.key for issue in issues),
        )
        return CompileResult.failure(tuple(issues))


def compile_query(
    raw: Mapping[str, str],
    field_spec: FieldSpec,
    pagination: PaginationExtractor | None = None,
) -> CompileResult:
    """One-shot helper: ``QueryCompiler(field_spec, pagination).compile(raw)``."""
    return QueryCompiler(field_spec, pagination).compile(raw)
