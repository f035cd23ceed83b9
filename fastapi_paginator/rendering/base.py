"""Renderer base class for pagination controls."""

from typing import Any, Sequence

from fastapi_paginator.schemas.page import PageLink


class RendererBase:
    """Define the rendering API used by ``Paginator.to_html``."""

    def render(
        self,
        pages: Sequence[PageLink],
        *,
        previous: PageLink | None = None,
        next: PageLink | None = None,
    ) -> Any:
        """Return markup for the page links and the adjacent-page links."""
        raise NotImplementedError
