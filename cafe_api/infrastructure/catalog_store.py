"""Catalog Store — process-wide read-only catalog with startup loading and health checks.

Invariants:
    - Catalog is built once, before requests are accepted, and never mutated
    - File read/parse/validation failures mapped to CatalogLoadError (core/errors.py)
    - No lock: there is no writer after init_catalog()

Design Decisions:
    - Singleton catalog_store initialized on startup: FastAPI lifespan manages lifecycle
    - get_catalog as a FastAPI dependency: tests override it without touching the singleton
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from cafe_api.core.catalog import DEFAULT_CATALOG, build_catalog
from cafe_api.core.domain_types import Catalog
from cafe_api.core.errors import CatalogLoadError
from cafe_api.schemas.catalog import CatalogFile

logger = logging.getLogger(__name__)


def load_catalog_file(path: str | Path) -> Catalog:
    """Read and validate a UTF-8 JSON catalog file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        logger.error(f"Catalog file unreadable: {e}")
        raise CatalogLoadError("file could not be read", str(path))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Catalog file is not valid JSON: {e}")
        raise CatalogLoadError("file is not valid UTF-8 JSON", str(path))
    try:
        parsed = CatalogFile.model_validate(raw)
    except PydanticValidationError as e:
        logger.error(f"Catalog file failed validation: {e}")
        raise CatalogLoadError("invalid catalog structure", str(path))
    return build_catalog(parsed.root)


class CatalogStore:
    """Holds the read-only catalog for the lifetime of the process."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    @classmethod
    def from_settings(cls, catalog_file: str | None = None) -> "CatalogStore":
        if catalog_file:
            catalog = load_catalog_file(catalog_file)
            source = catalog_file
        else:
            catalog = DEFAULT_CATALOG
            source = "built-in"
        logger.info(
            f"Catalog loaded from {source}",
            extra={"cities": len(catalog)},
        )
        return cls(catalog)

    def health_check(self) -> bool:
        """Ready when at least one city is available."""
        return len(self.catalog) > 0


# Singleton (initialized on startup)
catalog_store: CatalogStore | None = None


def init_catalog(catalog_file: str | None = None) -> CatalogStore:
    global catalog_store
    catalog_store = CatalogStore.from_settings(catalog_file)
    return catalog_store


def get_catalog() -> Catalog:
    """FastAPI dependency for the catalog."""
    if not catalog_store:
        raise RuntimeError("Catalog not initialized")
    return catalog_store.catalog
