"""FastAPI dependencies for page-number pagination."""

from __future__ import annotations

from typing import Any

from fastapi import Query, Request
from pydantic import BaseModel

from fastapi_paginator.core.paginator import Paginator
from fastapi_paginator.utils.url_pattern import build_url_pattern


class PageParams(BaseModel):
    """Validated ``page`` / ``per_page`` query parameters."""

    page: int = 1
    per_page: int = 10


def page_params(
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=100),
) -> PageParams:
    """Read the page query parameters of the current request."""
    return PageParams(page=page, per_page=per_page)


def paginator_from_request(
    request: Request,
    total_items: int,
    params: PageParams,
    *,
    page_param: str = "page",
    paginator_class: type[Paginator] = Paginator,
    **options: Any,
) -> Paginator:
    """Build a ``Paginator`` whose page URLs point back at this request.

    Examples:
        @app.get("/articles", response_class=HTMLResponse)
        def articles(request: Request, params: PageParams = Depends(page_params)):
            paginator = paginator_from_request(request, count_articles(), params)
            return render(items, paginator.to_html())

    Extra keyword ``options`` are passed to the paginator (``max_pages_to_show``,
    ``previous_text``, ``next_text``, ``renderer``).
    """
    url_pattern = build_url_pattern(str(request.url), page_param)
    return paginator_class(
        total_items,
        params.per_page,
        params.page,
        url_pattern,
        **options,
    )
