"""FieldSpec — per-endpoint filterable fields and their permitted operators."""

from __future__ import annotations

from difflib import get_close_matches

from pydantic import BaseModel, ConfigDict, model_validator

from .exceptions import IssueKind
from .operators import FilterOperator
from .tokenizer import split_key


class FieldSpec(BaseModel):
    """
    Immutable whitelist for one list/search endpoint.

    Attributes:
        equality_only: Attributes that may only be matched exactly.
        any_operator: Attributes that accept every ``FilterOperator``.
        reserved_keys: Extra query keys the endpoint consumes itself
            (besides pagination); they never become predicates.

    Example::

        posts = FieldSpec(
            equality_only=["createdBy", "status"],
            any_operator=["title", "content"],
        )
        posts.check("status", FilterOperator.NE)
        # -> (IssueKind.ILLEGAL_OPERATOR_FOR_FIELD, "...")
    """

    model_config = ConfigDict(frozen=True)

    equality_only: frozenset[str] = frozenset()
    any_operator: frozenset[str] = frozenset()
    reserved_keys: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def check_disjoint(self) -> FieldSpec:
        overlap = self.equality_only & self.any_operator
        if overlap:
            raise ValueError(
                "Attributes cannot be both equality-only and any-operator: "
                f"{', '.join(sorted(overlap))}"
            )
        shadowed = self.attributes & self.reserved_keys
        if shadowed:
            raise ValueError(
                f"Attributes shadowed by reserved keys: {', '.join(sorted(shadowed))}"
            )
        # ``price_lt`` would always be read as ``price`` + LT.
        ambiguous = sorted(
            a for a in self.attributes if split_key(a).attribute != a
        )
        if ambiguous:
            raise ValueError(
                "Attribute names end in an operator suffix and cannot be "
                f"addressed: {', '.join(ambiguous)}"
            )
        return self

    @property
    def attributes(self) -> frozenset[str]:
        return self.equality_only | self.any_operator

    def check(
        self, attribute: str, operator: FilterOperator
    ) -> tuple[IssueKind, str] | None:
        """Return ``None`` if allowed, else ``(kind, reason)``."""
        if attribute in self.equality_only:
            if operator is FilterOperator.EQ:
                return None
            return (
                IssueKind.ILLEGAL_OPERATOR_FOR_FIELD,
                f"Operator {operator.value!r} not allowed for field "
                f"{attribute!r} (equality only)",
            )
        if attribute in self.any_operator:
            return None
        message = f"Field {attribute!r} is not filterable"
        suggestions = get_close_matches(attribute, sorted(self.attributes), n=3)
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"
        return IssueKind.UNKNOWN_ATTRIBUTE, message
