"""Page-window pagination for HTML navigation controls."""

from __future__ import annotations

import logging
from typing import Any

from markupsafe import Markup

from fastapi_paginator.core.errors import InvalidConfiguration
from fastapi_paginator.rendering.base import RendererBase
from fastapi_paginator.rendering.bootstrap import BootstrapRenderer
from fastapi_paginator.schemas.page import (
    ELLIPSIS,
    PageDescriptor,
    PageLink,
    PaginationMeta,
)

logger = logging.getLogger(__name__)

MIN_PAGES_TO_SHOW = 3


class Paginator:
    """Compute page numbers, URLs and item ranges for a paginated dataset.

    Every query is computed from the current settings; nothing is cached, so
    the attributes can be changed freely between calls. Instances are not
    thread-safe.

    Example:
        paginator = Paginator(95, 10, 4, "/articles?page=(:num)")
        paginator.get_pages()   # descriptors for pages 1..10
        paginator.to_html()     # '<div class="navigation">...'
    """

    NUM_PLACEHOLDER = "(:num)"

    max_pages_to_show_default: int = 10
    previous_text: str = "&laquo; Previous"
    next_text: str = "Next &raquo;"
    renderer_class: type[RendererBase] = BootstrapRenderer

    def __init__(
        self,
        total_items: int = 0,
        items_per_page: int = 10,
        current_page: int = 1,
        url_pattern: str = "",
        *,
        max_pages_to_show: int | None = None,
        previous_text: str | None = None,
        next_text: str | None = None,
        renderer: RendererBase | None = None,
    ) -> None:
        """Store the pagination settings.

        Args:
            total_items: Number of items across all pages.
            items_per_page: Page size; ``0`` yields zero pages.
            current_page: 1-based page number, not validated.
            url_pattern: URL with ``(:num)`` where the page number goes,
                e.g. ``"/foo/page/(:num)"``.
            max_pages_to_show: Upper bound on page links, at least 3.
            previous_text: Label of the previous-page link.
            next_text: Label of the next-page link.
            renderer: Renderer used by :meth:`to_html`.
        """
        self.total_items = total_items
        self.items_per_page = items_per_page
        self.current_page = current_page
        self.url_pattern = url_pattern
        self._max_pages_to_show = self.max_pages_to_show_default
        if max_pages_to_show is not None:
            self.max_pages_to_show = max_pages_to_show
        if previous_text is not None:
            self.previous_text = previous_text
        if next_text is not None:
            self.next_text = next_text
        self.renderer = renderer or self.renderer_class()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(total_items={self.total_items}, "
            f"items_per_page={self.items_per_page}, "
            f"current_page={self.current_page}, url_pattern={self.url_pattern!r})"
        )

    def __str__(self) -> str:
        return self.to_html()

    def __html__(self) -> Markup:
        return Markup(self.to_html())

    @property
    def max_pages_to_show(self) -> int:
        """Maximum number of page links, anchors included."""
        return self._max_pages_to_show

    @max_pages_to_show.setter
    def max_pages_to_show(self, value: int) -> None:
        if value < MIN_PAGES_TO_SHOW:
            logger.warning("Rejected max_pages_to_show=%s", value)
            raise InvalidConfiguration(
                f"max_pages_to_show cannot be less than {MIN_PAGES_TO_SHOW}.",
                parameter="max_pages_to_show",
            )
        self._max_pages_to_show = value

    @property
    def num_pages(self) -> int:
        """Total number of pages."""
        if self.items_per_page == 0:
            return 0
        return (self.total_items + self.items_per_page - 1) // self.items_per_page

    def get_page_url(self, page_num: int) -> str:
        """Return the URL for a page by filling in ``(:num)``."""
        return self.url_pattern.replace(self.NUM_PLACEHOLDER, str(page_num))

    @property
    def next_page(self) -> int | None:
        if self.current_page < self.num_pages:
            return self.current_page + 1
        return None

    @property
    def prev_page(self) -> int | None:
        if self.current_page > 1:
            return self.current_page - 1
        return None

    @property
    def next_url(self) -> str | None:
        next_page = self.next_page
        if next_page is None or next_page < 1:
            return None
        return self.get_page_url(next_page)

    @property
    def prev_url(self) -> str | None:
        prev_page = self.prev_page
        if prev_page is None:
            return None
        return self.get_page_url(prev_page)

    @property
    def current_page_first_item(self) -> int | None:
        """1-based index of the first item on the current page, if any."""
        first = (self.current_page - 1) * self.items_per_page + 1
        if first > self.total_items:
            return None
        return first

    @property
    def current_page_last_item(self) -> int | None:
        """1-based index of the last item on the current page, if any."""
        first = self.current_page_first_item
        if first is None:
            return None
        return min(first + self.items_per_page - 1, self.total_items)

    def get_pages(self) -> list[PageDescriptor]:
        """Return the page list, with ellipsis markers for skipped ranges.

        Pages 1 and ``num_pages`` are always present once there is more than
        one page. When the pages do not all fit, a window of
        ``max_pages_to_show - 2`` pages slides to keep the current page
        visible, e.g. for 10 pages, page 4 and 5 links::

            1, ..., 3, 4, 5, ..., 10

        An empty list means no control is needed (zero or one page).
        """
        num_pages = self.num_pages
        if num_pages <= 1:
            return []

        max_pages = self.max_pages_to_show
        if num_pages <= max_pages:
            return [self._create_page(num) for num in range(1, num_pages + 1)]

        num_adjacents = (max_pages - 3) // 2
        if self.current_page + num_adjacents > num_pages:
            sliding_start = num_pages - max_pages + 2
        else:
            sliding_start = self.current_page - num_adjacents
        if sliding_start < 2:
            sliding_start = 2

        sliding_end = sliding_start + max_pages - 3
        if sliding_end >= num_pages:
            sliding_end = num_pages - 1

        logger.debug(
            "Page window %s-%s of %s around page %s",
            sliding_start,
            sliding_end,
            num_pages,
            self.current_page,
        )

        pages = [self._create_page(1)]
        if sliding_start > 2:
            pages.append(self._create_ellipsis())
        pages.extend(
            self._create_page(num) for num in range(sliding_start, sliding_end + 1)
        )
        if sliding_end < num_pages - 1:
            pages.append(self._create_ellipsis())
        pages.append(self._create_page(num_pages))
        return pages

    def get_links(self) -> dict[str, Any]:
        """Return renderer input: previous link, page links and next link."""
        previous = None
        if self.prev_url:
            previous = PageLink(label=self.previous_text, url=self.prev_url)
        following = None
        if self.next_url:
            following = PageLink(label=self.next_text, url=self.next_url)
        return {
            "previous": previous,
            "pages": [self._page_link(page) for page in self.get_pages()],
            "next": following,
        }

    def to_html(self) -> str:
        """Render the pagination control as an HTML string."""
        links = self.get_links()
        return str(
            self.renderer.render(
                links["pages"], previous=links["previous"], next=links["next"]
            )
        )

    def to_meta(self) -> PaginationMeta:
        """Return pagination metadata for JSON responses."""
        return PaginationMeta(
            total_items=self.total_items,
            items_per_page=self.items_per_page,
            current_page=self.current_page,
            num_pages=self.num_pages,
            first_item=self.current_page_first_item,
            last_item=self.current_page_last_item,
        )

    def _create_page(self, page_num: int) -> PageDescriptor:
        return PageDescriptor(
            number=page_num,
            url=self.get_page_url(page_num),
            is_current=page_num == self.current_page,
        )

    def _create_ellipsis(self) -> PageDescriptor:
        return PageDescriptor(number=ELLIPSIS)

    def _page_link(self, page: PageDescriptor) -> PageLink:
        # Ellipsis entries and pages without a URL render as inert spans.
        if page.url:
            return PageLink(label=str(page.number), url=page.url, is_current=page.is_current)
        return PageLink(label=str(page.number), is_disabled=True)
