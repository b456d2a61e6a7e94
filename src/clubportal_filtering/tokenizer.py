"""Key tokenizer — ``age_gte`` -> (``age``, GTE)."""

from __future__ import annotations

from typing import NamedTuple

from .operators import OPERATOR_SUFFIXES, FilterOperator


class KeyToken(NamedTuple):
    attribute: str
    operator: FilterOperator


def split_key(key: str) -> KeyToken:
    """Split a raw query key into attribute and operator.

    Only the segment after the last underscore is inspected. When it is a
    known operator suffix the key is split there; otherwise the whole key is
    the attribute and the operator is EQ.
    """
    attribute, sep, suffix = key.rpartition("_")
    if sep and suffix in OPERATOR_SUFFIXES:
        return KeyToken(attribute, FilterOperator(suffix))
    return KeyToken(key, FilterOperator.EQ)


def join_key(token: KeyToken) -> str:
    """Inverse of :func:`split_key`."""
    if token.operator is FilterOperator.EQ:
        return token.attribute
    return f"{token.attribute}_{token.operator.value}"
