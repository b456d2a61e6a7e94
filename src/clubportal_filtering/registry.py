"""EndpointRegistry — one FieldSpec (and compiler) per list endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .compiler import QueryCompiler
from .exceptions import EndpointNotFoundError
from .pagination import PaginationExtractor
from .whitelist import FieldSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .config import FilteringConfig
    from .result import CompileResult

logger = logging.getLogger("clubportal.filtering.registry")


class EndpointRegistry:
    """
    Static wiring of list endpoints to their whitelists.

    Registration happens once at startup; afterwards the registry is only
    read, so it can be shared by concurrent requests.
    """

    def __init__(self, pagination: PaginationExtractor | None = None) -> None:
        self._pagination = pagination or PaginationExtractor()
        self._compilers: dict[str, QueryCompiler] = {}

    @classmethod
    def from_config(cls, config: FilteringConfig) -> EndpointRegistry:
        registry = cls(PaginationExtractor(config.pagination))
        for name, spec in config.endpoints.items():
            registry.register(name, spec)
        return registry

    def register(self, name: str, spec: FieldSpec) -> QueryCompiler:
        if name in self._compilers:
            raise ValueError(f"Endpoint {name!r} is already registered")
        compiler = QueryCompiler(spec, self._pagination, name=name)
        self._compilers[name] = compiler
        logger.debug(
            "Registered endpoint %s (%d equality-only, %d any-operator fields)",
            name,
            len(spec.equality_only),
            len(spec.any_operator),
        )
        return compiler

    def get(self, name: str) -> FieldSpec:
        return self.compiler_for(name).field_spec

    def compiler_for(self, name: str) -> QueryCompiler:
        try:
            return self._compilers[name]
        except KeyError:
            raise EndpointNotFoundError(name, self._compilers) from None

    def compile(self, name: str, raw: Mapping[str, str]) -> CompileResult:
        return self.compiler_for(name).compile(raw)

    @property
    def names(self) -> list[str]:
        return sorted(self._compilers)

    def __contains__(self, name: object) -> bool:
        return name in self._compilers


CLUB_ENDPOINTS: dict[str, FieldSpec] = {
    "users": FieldSpec(
        equality_only=frozenset({"role", "status", "studentCode", "course"}),
        any_operator=frozenset({"name", "email", "phone", "address"}),
    ),
    "posts": FieldSpec(
        equality_only=frozenset({"createdBy", "createdAt", "updatedAt"}),
        any_operator=frozenset({"title", "content"}),
    ),
    "events": FieldSpec(
        equality_only=frozenset({"createdBy"}),
        any_operator=frozenset({"title", "description", "location", "maxParticipants"}),
    ),
    "libraries": FieldSpec(
        equality_only=frozenset({"createdBy", "lastUpdateBy"}),
        any_operator=frozenset({"title", "description"}),
    ),
    "attachments": FieldSpec(
        equality_only=frozenset({"ownerType", "ownerId", "uploadedBy"}),
        any_operator=frozenset({"originalname", "size"}),
        reserved_keys=frozenset({"fileType"}),
    ),
    "notifications": FieldSpec(
        equality_only=frozenset({"isRead", "type", "relatedId"}),
        any_operator=frozenset({"title", "message"}),
    ),
}


def default_registry(pagination: PaginationExtractor | None = None) -> EndpointRegistry:
    """Registry with the portal's list endpoints wired in."""
    registry = EndpointRegistry(pagination)
    for name, spec in CLUB_ENDPOINTS.items():
        registry.register(name, spec)
    return registry
