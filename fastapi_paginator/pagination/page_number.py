"""Page-number pagination backed by ``Paginator``."""

from __future__ import annotations

from typing import Any

from fastapi_paginator.core.paginator import Paginator
from fastapi_paginator.utils.url_pattern import build_url_pattern

from .base import PaginationBase


class PageNumberPagination(PaginationBase):
    """Pagination driven by ``page[number]`` and ``page[size]``.

    ``params`` follows ``parse_page_params``: ``{"page": {"number": 2,
    "size": 10}, "base_url": "http://..."}``. Missing or invalid values fall
    back to page 1 and ``default_size``; sizes above ``max_size`` are capped.
    """

    number_param: str = "number"
    size_param: str = "size"
    default_size: int = 10
    max_size: int = 100
    max_pages_to_show: int = 10
    paginator_class: type[Paginator] = Paginator

    def get_page_values(self, params: dict[str, Any]) -> tuple[int, int]:
        """Return ``(number, size)`` from the ``page`` parameter family."""
        page = params.get("page", {})
        number = self._positive_int(page.get(self.number_param), 1)
        size = self._positive_int(page.get(self.size_param), self.default_size)
        return number, min(size, self.max_size)

    def get_paginator(self, *, total: int, params: dict[str, Any]) -> Paginator:
        """Build a ``Paginator`` for the requested page."""
        number, size = self.get_page_values(params)
        base_url = params.get("base_url")
        url_pattern = ""
        if base_url:
            url_pattern = build_url_pattern(base_url, f"page[{self.number_param}]")
        return self.paginator_class(
            total,
            size,
            number,
            url_pattern,
            max_pages_to_show=self.max_pages_to_show,
        )

    def paginate_queryset(self, items: list[Any], params: dict[str, Any]) -> list[Any]:
        """Return the items of the requested page."""
        paginator = self.get_paginator(total=len(items), params=params)
        first = paginator.current_page_first_item
        last = paginator.current_page_last_item
        if first is None or last is None:
            return []
        return items[first - 1 : last]

    def get_links(self, *, total: int, params: dict[str, Any]) -> dict[str, str]:
        """Build pagination links for page-number pagination."""
        if not params.get("base_url"):
            return {}
        paginator = self.get_paginator(total=total, params=params)
        links = {
            "self": paginator.get_page_url(paginator.current_page),
            "first": paginator.get_page_url(1),
            "last": paginator.get_page_url(max(paginator.num_pages, 1)),
        }
        if paginator.prev_url is not None:
            links["prev"] = paginator.prev_url
        if paginator.next_url is not None:
            links["next"] = paginator.next_url
        return links

    def get_meta(self, *, total: int, params: dict[str, Any]) -> dict[str, Any]:
        """Build pagination metadata from the paginator state."""
        paginator = self.get_paginator(total=total, params=params)
        return paginator.to_meta().model_dump()

    def _positive_int(self, value: Any, default: int) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError):
            return default
        return number if number >= 1 else default
