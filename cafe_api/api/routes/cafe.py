"""Cafe Listing — GET /cafe, venues of one city as a comma-separated list.

Invariants:
    - All parameters arrive as raw strings; core/cafe_query.py owns validation
    - A repeated parameter resolves to its first occurrence
    - Validation errors propagate as CafeError to the global handler (400, plain text)
    - Success is always 200 text/plain, possibly with an empty body
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from cafe_api.core.cafe_query import answer_cafe_query, format_cafe_list
from cafe_api.core.domain_types import Catalog
from cafe_api.infrastructure.catalog_store import get_catalog

logger = logging.getLogger(__name__)
router = APIRouter(tags=["cafe"])


def _first_value(request: Request, name: str) -> str | None:
    """First occurrence of a query parameter (Starlette's .get() returns the last)."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


@router.get("/cafe", response_class=PlainTextResponse)
async def list_cafes(
    request: Request,
    catalog: Catalog = Depends(get_catalog),
):
    """List venues of a city, optionally filtered by name and capped by count.

    Query parameters: city (required), count (non-negative integer), search.
    """
    query, cafes = answer_cafe_query(
        catalog,
        _first_value(request, "city"),
        _first_value(request, "count"),
        _first_value(request, "search"),
    )
    logger.debug(
        f"Listing {len(cafes)} cafe(s) for {query.city}",
        extra={
            "city": query.city,
            "count": query.count,
            "search": query.search or None,
            "returned": len(cafes),
        },
    )
    return PlainTextResponse(format_cafe_list(cafes))
