"""API test fixtures — FastAPI test client over the reference catalog.

Invariants:
    - get_catalog dependency overridden to serve the test catalog
    - catalog_store singleton patched so readiness probes see the same catalog
    - Overrides and singleton restored after each test

Design Decisions:
    - ASGITransport does not run the lifespan: the store is installed by the fixture
"""

import pytest
from httpx import ASGITransport, AsyncClient

import cafe_api.infrastructure.catalog_store as catalog_module
from cafe_api.core.catalog import DEFAULT_CATALOG
from cafe_api.infrastructure.catalog_store import CatalogStore, get_catalog
from cafe_api.main import app


@pytest.fixture
def test_catalog():
    return DEFAULT_CATALOG


@pytest.fixture
async def client(test_catalog):
    """FastAPI test client with the catalog dependency overridden."""
    app.dependency_overrides[get_catalog] = lambda: test_catalog

    original_store = catalog_module.catalog_store
    catalog_module.catalog_store = CatalogStore(test_catalog)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    catalog_module.catalog_store = original_store
