"""
Predicates and the compiled filter handed to the persistence layer.

Example::

    compiled = (
        PredicateBuilder()
        .add("age", FilterOperator.GTE, 18)
        .add("age", FilterOperator.LTE, 30)
        .add("status", FilterOperator.EQ, "active")
        .build()
    )
    # -> age in [18, 30] AND status == "active"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from .operators import FilterOperator

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .coercion import Scalar


class Predicate(NamedTuple):
    attribute: str
    operator: FilterOperator
    value: Scalar


class CompiledFilter:
    """
    Predicates grouped by attribute, implicitly AND-ed.

    Two filters compare equal when they hold the same predicates, whatever
    order they were added in.
    """

    __slots__ = ("_groups",)

    def __init__(
        self, groups: Mapping[str, tuple[Predicate, ...]] | None = None
    ) -> None:
        self._groups: dict[str, tuple[Predicate, ...]] = dict(groups or {})

    @property
    def attributes(self) -> list[str]:
        return list(self._groups)

    @property
    def predicates(self) -> list[Predicate]:
        return [p for group in self._groups.values() for p in group]

    def for_attribute(self, attribute: str) -> tuple[Predicate, ...]:
        return self._groups.get(attribute, ())

    def is_empty(self) -> bool:
        return not self._groups

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Serialise to ``{attribute: {operator: value}}``."""
        return {
            attribute: {p.operator.value: p.value for p in group}
            for attribute, group in self._groups.items()
        }

    def _canonical(self) -> dict[str, frozenset[tuple[str, type, Scalar]]]:
        # bool/int/float compare equal across types; keep the type in the key
        return {
            attribute: frozenset(
                (p.operator.value, type(p.value), p.value) for p in group
            )
            for attribute, group in self._groups.items()
        }

    def __iter__(self) -> Iterator[Predicate]:
        return iter(self.predicates)

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._groups

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompiledFilter):
            return NotImplemented
        return self._canonical() == other._canonical()

    def __hash__(self) -> int:
        return hash(frozenset(self._canonical().items()))

    def __repr__(self) -> str:
        return f"CompiledFilter({self.to_dict()!r})"


class PredicateBuilder:
    """Accumulates predicates; the same attribute may be added repeatedly."""

    def __init__(self) -> None:
        self._groups: dict[str, list[Predicate]] = {}

    def add(
        self,
        attribute: str,
        operator: FilterOperator,
        value: Scalar,
    ) -> PredicateBuilder:
        self._groups.setdefault(attribute, []).append(
            Predicate(attribute, operator, value)
        )
        return self

    def build(self) -> CompiledFilter:
        return CompiledFilter(
            {attribute: tuple(group) for attribute, group in self._groups.items()}
        )

    def reset(self) -> PredicateBuilder:
        """Clear all predicates and return ``self`` for reuse."""
        self._groups.clear()
        return self
