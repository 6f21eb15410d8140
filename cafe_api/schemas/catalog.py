"""Catalog Schemas — Pydantic model validating a catalog file before it is loaded.

Invariants:
    - Top level is a JSON object: city → list of venue names
    - City keys and venue names are stripped and non-empty
    - Venue names never contain "," (the /cafe response delimiter)

Design Decisions:
    - RootModel over a wrapper key: the file stays a plain {city: [names]} object
"""

from pydantic import RootModel, field_validator


class CatalogFile(RootModel[dict[str, list[str]]]):
    """Catalog file contents; validates cities and venue names."""

    @field_validator("root")
    @classmethod
    def validate_entries(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        cleaned: dict[str, list[str]] = {}
        for city, names in v.items():
            city = city.strip()
            if not city:
                raise ValueError("city name cannot be empty or whitespace")
            stripped = [name.strip() for name in names]
            for name in stripped:
                if not name:
                    raise ValueError(f"venue name in '{city}' cannot be empty")
                if "," in name:
                    raise ValueError(
                        f"venue name '{name}' in '{city}' cannot contain ','",
                    )
            cleaned[city] = stripped
        return cleaned
