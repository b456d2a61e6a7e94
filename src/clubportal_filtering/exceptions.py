"""
Filtering exception hierarchy.

All exceptions inherit from ``FilteringError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable


class IssueKind(str, Enum):
    """Why a single query key was rejected."""

    UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"
    ILLEGAL_OPERATOR_FOR_FIELD = "ILLEGAL_OPERATOR_FOR_FIELD"
    VALUE_COERCION_FAILURE = "VALUE_COERCION_FAILURE"


class QueryIssue(NamedTuple):
    """One rejected raw key and the reason it was rejected."""

    key: str
    kind: IssueKind
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "error": self.kind.value, "message": self.reason}


class FilteringError(Exception):
    """Base exception for all filtering errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class QueryValidationError(FilteringError):
    """
    A request's query could not be compiled.

    Carries every offending key at once; the message enumerates the raw
    keys comma-joined, e.g.::

        Invalid query parameters: status_ne, age_gt
    """

    def __init__(self, issues: Iterable[QueryIssue]) -> None:
        self.issues: tuple[QueryIssue, ...] = tuple(issues)
        super().__init__(f"Invalid query parameters: {', '.join(self.keys)}")

    @property
    def keys(self) -> list[str]:
        return [issue.key for issue in self.issues]

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "QUERY_VALIDATION_ERROR",
            "message": str(self),
            "issues": [issue.to_dict() for issue in self.issues],
        }


class ValueCoercionError(FilteringError, ValueError):
    """A raw value cannot be converted to the type its operator requires."""

    def __init__(self, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"{value!r} is not a valid {expected}")


class FilterParseError(FilteringError):
    """Raised when a raw query string or JSON payload is malformed."""


class EndpointNotFoundError(FilteringError, LookupError):
    """No field whitelist is registered under the requested endpoint name."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"No endpoint registered as {name!r}. "
            f"Available: {', '.join(self.available) or '(none)'}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ENDPOINT_NOT_FOUND",
            "endpoint": self.name,
            "available": self.available,
        }


class FilterAdapterError(FilteringError):
    """Raised when a compiled filter cannot be translated for a backend."""
