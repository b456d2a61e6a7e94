"""Query-filter compiler for list/search endpoints — whitelist, coercion, pagination."""

from __future__ import annotations

from .coercion import coerce_value, parse_number
from .compiler import QueryCompiler, compile_query
from .config import FilteringConfig
from .exceptions import (
    EndpointNotFoundError,
    FilterAdapterError,
    FilteringError,
    FilterParseError,
    IssueKind,
    QueryIssue,
    QueryValidationError,
    ValueCoercionError,
)
from .operators import FilterOperator
from .pagination import (
    PageInfo,
    PaginationConfig,
    PaginationExtractor,
    PaginationParams,
)
from .predicates import CompiledFilter, Predicate, PredicateBuilder
from .query_string import QueryStringBuilder
from .registry import CLUB_ENDPOINTS, EndpointRegistry, default_registry
from .result import CompileResult
from .syntax import JsonQuerySyntax, QueryStringSyntax, parse_raw_query
from .tokenizer import KeyToken, join_key, split_key
from .whitelist import FieldSpec

__all__ = [
    # Core types
    "FilterOperator",
    "FieldSpec",
    "KeyToken",
    "Predicate",
    "CompiledFilter",
    "PaginationParams",
    "PageInfo",
    # Pipeline
    "QueryCompiler",
    "CompileResult",
    "PredicateBuilder",
    "PaginationExtractor",
    "compile_query",
    "split_key",
    "join_key",
    "coerce_value",
    "parse_number",
    # Configuration
    "FilteringConfig",
    "PaginationConfig",
    "EndpointRegistry",
    "CLUB_ENDPOINTS",
    "default_registry",
    # Input / output helpers
    "QueryStringSyntax",
    "JsonQuerySyntax",
    "parse_raw_query",
    "QueryStringBuilder",
    # Exceptions
    "FilteringError",
    "QueryValidationError",
    "QueryIssue",
    "IssueKind",
    "ValueCoercionError",
    "FilterParseError",
    "EndpointNotFoundError",
    "FilterAdapterError",
]
