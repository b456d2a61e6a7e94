"""Query syntaxes — decode a request's filter into a flat string mapping."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl

from .exceptions import FilterParseError


class QuerySyntax:
    """Base for raw query decoders."""

    def parse(self, raw: Any) -> dict[str, str]:
        """Decode *raw* into a ``{key: value}`` mapping of strings."""
        raise NotImplementedError


class QueryStringSyntax(QuerySyntax):
    """Parse ``title_like=club&page=2``; the last value wins for repeated keys."""

    def parse(self, raw: Any) -> dict[str, str]:
        if not raw:
            return {}
        if not isinstance(raw, str):
            raise FilterParseError(f"Expected a query string, got {type(raw).__name__}")
        text = raw[1:] if raw.startswith("?") else raw
        try:
            pairs = parse_qsl(text, keep_blank_values=True, strict_parsing=False)
        except ValueError as e:
            raise FilterParseError(str(e)) from e
        return dict(pairs)


class JsonQuerySyntax(QuerySyntax):
    """Parse a flat JSON object: ``{"page": 1, "createdBy": "66511d24..."}``."""

    def parse(self, raw: Any) -> dict[str, str]:
        if raw is None or raw == "":
            return {}
        if isinstance(raw, str):
            try:
                data = json.loads(raw)
            except ValueError as e:
                raise FilterParseError(str(e)) from e
        else:
            data = raw
        if not isinstance(data, dict):
            raise FilterParseError("Filter JSON must be an object")
        return {str(k): self._stringify(str(k), v) for k, v in data.items()}

    def _stringify(self, key: str, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float, str)):
            return str(value)
        raise FilterParseError(
            f"Value for {key!r} must be a string, number or boolean"
        )


def detect_syntax(raw: str) -> QuerySyntax:
    """Pick JSON for payloads that look like an object, query string otherwise."""
    if raw.lstrip().startswith("{"):
        return JsonQuerySyntax()
    return QueryStringSyntax()


def parse_raw_query(raw: str) -> dict[str, str]:
    return detect_syntax(raw).parse(raw)
