"""Catalog tests — immutable construction and the built-in reference dataset.

Tests:
    - build_catalog preserves city keys and item order
    - Catalog mapping and item tuples cannot be mutated
    - Items are frozen value objects compared by name
    - Reference dataset contains moscow and tula
"""

import dataclasses

import pytest

from cafe_api.core.catalog import DEFAULT_CAFES, DEFAULT_CATALOG, build_catalog
from cafe_api.core.domain_types import Item


def test_build_catalog_preserves_order():
    catalog = build_catalog({"tula": ["B", "A", "C"]})
    assert catalog["tula"] == (Item("B"), Item("A"), Item("C"))


def test_build_catalog_copies_input():
    raw = {"tula": ["A"]}
    catalog = build_catalog(raw)
    raw["tula"].append("B")
    raw["omsk"] = ["C"]
    assert catalog["tula"] == (Item("A"),)
    assert "omsk" not in catalog


def test_catalog_mapping_is_read_only():
    catalog = build_catalog({"tula": ["A"]})
    with pytest.raises(TypeError):
        catalog["omsk"] = ()  # type: ignore[index]


def test_item_is_frozen():
    item = Item("Самовар")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.name = "Чайная"  # type: ignore[misc]
    assert item == Item("Самовар")


def test_default_catalog_matches_raw_cafes():
    assert set(DEFAULT_CATALOG) == {"moscow", "tula"}
    for city, names in DEFAULT_CAFES.items():
        assert [item.name for item in DEFAULT_CATALOG[city]] == names


def test_default_catalog_names_have_no_delimiter():
    for items in DEFAULT_CATALOG.values():
        assert all("," not in item.name for item in items)
