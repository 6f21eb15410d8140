"""Cafe Query — validate GET /cafe parameters and select matching venues.

Invariants:
    - Pure functions: no IO, no async, no logging
    - City is validated before count (unknown city wins when both are bad)
    - count accepts ASCII digits with an optional leading "+", up to 2**63 - 1
    - Only an absent count means "no cap"; a present but empty count is invalid
    - Search is case-insensitive over code points (lower() on both sides)
    - Output keeps catalog order and never ends with a delimiter

Design Decisions:
    - Regex over int(): int() accepts whitespace, "_" separators and non-ASCII digits
    - Significant digits checked before int(): int() refuses over-long strings
    - Filter before truncate: count caps the matches, not the city's full list
"""

import re

from cafe_api.core.domain_types import CafeQuery, Catalog, Item
from cafe_api.core.errors import InvalidCountError, UnknownCityError

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**63 - 1
_MAX_COUNT_DIGITS = len(str(_MAX_COUNT))
_DELIMITER = ","


def _parse_count(raw: str | None) -> int | None:
    """Parse the count parameter. None means no cap."""
    if raw is None:
        return None
    if not _COUNT_PATTERN.fullmatch(raw):
        raise InvalidCountError(raw)
    digits = raw.lstrip("+").lstrip("0")
    if len(digits) > _MAX_COUNT_DIGITS:
        raise InvalidCountError(raw)
    count = int(digits or "0")
    if count > _MAX_COUNT:
        raise InvalidCountError(raw)
    return count


def parse_cafe_query(
    catalog: Catalog,
    city: str | None,
    count: str | None,
    search: str | None,
) -> CafeQuery:
    """Validate raw query parameters against the catalog.

    Raises UnknownCityError or InvalidCountError.
    """
    if not city or city not in catalog:
        raise UnknownCityError(city)
    return CafeQuery(city=city, count=_parse_count(count), search=search or "")


def _matches(item: Item, needle: str) -> bool:
    return needle in item.name.lower()


def select_cafes(items: tuple[Item, ...], query: CafeQuery) -> list[Item]:
    """Apply search filter, then the count cap, preserving catalog order."""
    selected = list(items)
    if query.search:
        needle = query.search.lower()
        selected = [item for item in selected if _matches(item, needle)]
    if query.count is not None:
        selected = selected[:query.count]
    return selected


def format_cafe_list(items: list[Item]) -> str:
    """Join venue names with ","; empty string for no items."""
    return _DELIMITER.join(item.name for item in items)


def answer_cafe_query(
    catalog: Catalog,
    city: str | None,
    count: str | None,
    search: str | None,
) -> tuple[CafeQuery, list[Item]]:
    """Full pipeline: validate, then select. Returns the query and its items."""
    query = parse_cafe_query(catalog, city, count, search)
    return query, select_cafes(catalog[query.city], query)
