"""Pagination — page/limit extraction and list-response metadata."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .coercion import coerce_positive_int

if TYPE_CHECKING:
    from collections.abc import Mapping


class PaginationParams(NamedTuple):
    """
    One-based page and page size.

    ``PaginationExtractor`` only produces positive values; hand-built params
    below 1 are treated as the first page.
    """

    page: int = 1
    limit: int = 10

    @property
    def skip(self) -> int:
        return max(self.page - 1, 0) * max(self.limit, 0)

    @property
    def take(self) -> int:
        return self.limit

    def next(self) -> PaginationParams:
        return self._replace(page=self.page + 1)

    def previous(self) -> PaginationParams | None:
        if self.page <= 1:
            return None
        return self._replace(page=self.page - 1)


class PageInfo(NamedTuple):
    """Pagination block of a list response: ``{total, page, limit}``."""

    total: int
    page: int
    limit: int

    @classmethod
    def of(cls, total: int, params: PaginationParams) -> PageInfo:
        return cls(total=total, page=params.page, limit=params.limit)

    @property
    def pages(self) -> int:
        if self.total <= 0 or self.limit <= 0:
            return 0
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "page": self.page, "limit": self.limit}


class PaginationConfig(BaseModel):
    """Reserved pagination keys and their defaults."""

    model_config = ConfigDict(frozen=True)

    page_key: str = "page"
    limit_key: str = "limit"
    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=10, ge=1)
    max_limit: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_keys(self) -> PaginationConfig:
        if self.page_key == self.limit_key:
            raise ValueError("page_key and limit_key must differ")
        if self.max_limit is not None and self.default_limit > self.max_limit:
            raise ValueError("default_limit cannot exceed max_limit")
        return self


class PaginationExtractor:
    """Pull page/limit out of a raw query; never fails."""

    def __init__(self, config: PaginationConfig | None = None) -> None:
        self._config = config or PaginationConfig()

    @property
    def config(self) -> PaginationConfig:
        return self._config

    @property
    def keys(self) -> frozenset[str]:
        return frozenset({self._config.page_key, self._config.limit_key})

    def extract(self, raw: Mapping[str, str]) -> PaginationParams:
        cfg = self._config
        page = coerce_positive_int(raw.get(cfg.page_key), cfg.default_page)
        limit = coerce_positive_int(raw.get(cfg.limit_key), cfg.default_limit)
        if cfg.max_limit is not None:
            limit = min(limit, cfg.max_limit)
        return PaginationParams(page=page, limit=limit)
