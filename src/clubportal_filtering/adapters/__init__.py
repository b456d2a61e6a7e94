"""Persistence adapters. ``sqla`` needs the ``sqlalchemy`` extra and is imported explicitly."""

from __future__ import annotations

from .base import IFilterAdapter
from .mongo import MongoFilterAdapter

__all__ = [
    "IFilterAdapter",
    "MongoFilterAdapter",
]
