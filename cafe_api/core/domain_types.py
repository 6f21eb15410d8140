"""Domain Types — value objects shared by the catalog and the query pipeline.

Invariants:
    - Item is immutable; its identity is its name
    - Catalog maps city → tuple of Items in catalog order, read-only after construction
    - CafeQuery.count is None (all items) or a non-negative int
    - CafeQuery.search is "" when no filtering applies

Design Decisions:
    - Frozen dataclasses over dicts: hashable, comparable, no accidental mutation
    - Catalog as a Mapping alias: MappingProxyType satisfies it without a wrapper class
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Item:
    """A venue listed in the catalog."""
    name: str


Catalog: TypeAlias = Mapping[str, tuple[Item, ...]]


@dataclass(frozen=True)
class CafeQuery:
    """Validated request parameters for GET /cafe."""
    city: str
    count: int | None = None
    search: str = ""
