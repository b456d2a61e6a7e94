"""IFilterAdapter — protocol for backend-specific translation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..pagination import PaginationParams
    from ..predicates import CompiledFilter


@runtime_checkable
class IFilterAdapter(Protocol):
    """Translate a compiled filter and pagination to a backend-native query.

    Examples include MongoDB filter docs or SQL WHERE constructs.
    """

    def to_backend_query(
        self, compiled: CompiledFilter, pagination: PaginationParams
    ) -> Any:
        """Return backend-native query structure."""
        ...
