"""
Filtering configuration.

Portal settings describe every list endpoint's whitelist once, at startup::

    config = FilteringConfig.model_validate(
        {
            "pagination": {"default_limit": 20, "max_limit": 100},
            "endpoints": {
                "posts": {
                    "equality_only": ["createdBy", "status"],
                    "any_operator": ["title", "content"],
                },
            },
        }
    )
    registry = EndpointRegistry.from_config(config)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .pagination import PaginationConfig
from .whitelist import FieldSpec


class FilteringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    endpoints: dict[str, FieldSpec] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_pagination_keys(self) -> FilteringConfig:
        page_keys = {self.pagination.page_key, self.pagination.limit_key}
        for name, spec in self.endpoints.items():
            clash = page_keys & (spec.attributes | spec.reserved_keys)
            if clash:
                raise ValueError(
                    f"Endpoint {name!r} reuses pagination keys: "
                    f"{', '.join(sorted(clash))}"
                )
        return self
