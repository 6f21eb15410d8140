"""Catalog Construction — immutable city → venues mapping.

Invariants:
    - Pure function: no IO (file loading lives in infrastructure/catalog_store.py)
    - Result is a MappingProxyType of tuples: neither cities nor items can be mutated
    - Item order within a city is preserved exactly as given
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from cafe_api.core.domain_types import Catalog, Item


DEFAULT_CAFES: dict[str, list[str]] = {
    "moscow": [
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Ложка и вилка",
    ],
    "tula": [
        "Тульский пряник",
        "Самовар",
        "Чайная на Кремлёвской",
    ],
}


def build_catalog(raw: Mapping[str, Iterable[str]]) -> Catalog:
    """Build a read-only catalog from plain venue names per city."""
    return MappingProxyType({
        city: tuple(Item(name=name) for name in names)
        for city, names in raw.items()
    })


DEFAULT_CATALOG: Catalog = build_catalog(DEFAULT_CAFES)
