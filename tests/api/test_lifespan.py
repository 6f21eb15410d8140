"""Application lifespan tests — catalog loaded at startup, bad catalog aborts startup.

Tests cover:
    - Valid CATALOG_FILE: store initialized before the app yields, served by GET /cafe
    - Blank CATALOG_FILE: built-in catalog
    - Invalid CATALOG_FILE: CatalogLoadError propagates, store left uninitialized

Design Decisions:
    - Settings cache cleared around each test so env changes reach get_settings()
    - Root handlers added by setup_logging removed after each test
"""

import json
import logging

import pytest
from httpx import ASGITransport, AsyncClient

import cafe_api.infrastructure.catalog_store as catalog_module
from cafe_api.config import get_settings
from cafe_api.core.catalog import DEFAULT_CATALOG
from cafe_api.core.errors import CatalogLoadError
from cafe_api.infrastructure.catalog_store import get_catalog
from cafe_api.main import app, lifespan


@pytest.fixture(autouse=True)
def _isolate_startup():
    original_store = catalog_module.catalog_store
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    catalog_module.catalog_store = None
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    catalog_module.catalog_store = original_store
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


async def test_lifespan_loads_catalog_file(tmp_path, monkeypatch):
    path = tmp_path / "cafes.json"
    path.write_text(
        json.dumps({"kazan": ["Чак-чак", "Эчпочмак"]}, ensure_ascii=False),
        encoding="utf-8",
    )
    monkeypatch.setenv("CATALOG_FILE", str(path))

    async with lifespan(app):
        catalog = get_catalog()
        assert list(catalog) == ["kazan"]
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            response = await client.get("/cafe?city=kazan&search=ЧАК")
    assert response.status_code == 200
    assert response.text == "Чак-чак"


async def test_lifespan_uses_builtin_catalog_without_file(monkeypatch):
    monkeypatch.setenv("CATALOG_FILE", "")
    async with lifespan(app):
        assert get_catalog() is DEFAULT_CATALOG


@pytest.mark.parametrize("content", ["{not json", json.dumps({"kazan": ["a,b"]})])
async def test_lifespan_aborts_on_invalid_catalog_file(tmp_path, monkeypatch, content):
    path = tmp_path / "cafes.json"
    path.write_text(content, encoding="utf-8")
    monkeypatch.setenv("CATALOG_FILE", str(path))

    with pytest.raises(CatalogLoadError):
        async with lifespan(app):
            pytest.fail("lifespan yielded with an invalid catalog")
    assert catalog_module.catalog_store is None


async def test_lifespan_aborts_on_missing_catalog_file(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_FILE", str(tmp_path / "absent.json"))
    with pytest.raises(CatalogLoadError, match="could not be read"):
        async with lifespan(app):
            pass
