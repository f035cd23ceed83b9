"""Pagination base class for list endpoints."""

from typing import Any


class PaginationBase:
    """Turn a page request into a slice of items plus links and meta.

    ``params`` carries the normalized ``page`` family from
    ``parse_page_params`` and, for link building, the request ``base_url``.
    """

    def paginate_queryset(
        self, items: list[Any], params: dict[str, Any]
    ) -> list[Any]:
        """Return the items on the requested page; empty past the last page."""
        raise NotImplementedError

    def get_links(self, *, total: int, params: dict[str, Any]) -> dict[str, str]:
        """Return page URLs keyed ``self``/``first``/``last``/``prev``/``next``.

        ``prev`` and ``next`` are left out when there is no such page.
        """
        raise NotImplementedError

    def get_meta(self, *, total: int, params: dict[str, Any]) -> dict[str, Any]:
        """Return the page count, page size and item range for ``total`` items."""
        raise NotImplementedError
