"""Tests for FieldSpec construction and operator validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from clubportal_filtering import FieldSpec, FilterOperator, IssueKind

NON_EQ_OPERATORS = [op for op in FilterOperator if op is not FilterOperator.EQ]


class TestConstruction:
    def test_accepts_lists(self) -> None:
        spec = FieldSpec(equality_only=["status"], any_operator=["age", "name"])
        assert spec.equality_only == frozenset({"status"})
        assert spec.attributes == frozenset({"status", "age", "name"})

    def test_overlap_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="both equality-only and any-operator"):
            FieldSpec(equality_only=["status"], any_operator=["status", "age"])

    def test_attribute_ending_in_operator_suffix_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="price_lt"):
            FieldSpec(any_operator=["price_lt"])

    def test_attribute_shadowed_by_reserved_key_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="fileType"):
            FieldSpec(equality_only=["fileType"], reserved_keys=["fileType"])

    def test_is_immutable(self) -> None:
        spec = FieldSpec(any_operator=["age"])
        with pytest.raises(ValidationError):
            spec.any_operator = frozenset({"name"})  # type: ignore[misc]


class TestCheck:
    def test_equality_only_accepts_eq(self, people_spec: FieldSpec) -> None:
        assert people_spec.check("status", FilterOperator.EQ) is None

    @pytest.mark.parametrize("operator", NON_EQ_OPERATORS)
    def test_equality_only_rejects_other_operators(
        self, people_spec: FieldSpec, operator: FilterOperator
    ) -> None:
        problem = people_spec.check("status", operator)
        assert problem is not None
        assert problem[0] is IssueKind.ILLEGAL_OPERATOR_FOR_FIELD

    @pytest.mark.parametrize("operator", list(FilterOperator))
    def test_any_operator_accepts_all(
        self, people_spec: FieldSpec, operator: FilterOperator
    ) -> None:
        assert people_spec.check("age", operator) is None

    def test_unknown_attribute(self, people_spec: FieldSpec) -> None:
        problem = people_spec.check("password", FilterOperator.EQ)
        assert problem is not None
        assert problem[0] is IssueKind.UNKNOWN_ATTRIBUTE

    def test_unknown_attribute_suggests_close_match(self, people_spec: FieldSpec) -> None:
        problem = people_spec.check("titel", FilterOperator.LIKE)
        assert problem is not None
        assert "Did you mean: title" in problem[1]
