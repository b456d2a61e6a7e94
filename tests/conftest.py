"""Shared fixtures for filtering tests."""

from __future__ import annotations

import pytest

from clubportal_filtering import FieldSpec, QueryCompiler


@pytest.fixture
def people_spec() -> FieldSpec:
    """Whitelist with both kinds of fields."""
    return FieldSpec(
        equality_only=["status", "role"],
        any_operator=["age", "name", "title"],
    )


@pytest.fixture
def compiler(people_spec: FieldSpec) -> QueryCompiler:
    return QueryCompiler(people_spec, name="people")
