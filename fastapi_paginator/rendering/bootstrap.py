"""Bootstrap-style HTML renderer."""

from __future__ import annotations

from typing import Sequence

from markupsafe import Markup, escape

from fastapi_paginator.schemas.page import PageLink

from .base import RendererBase


class BootstrapRenderer(RendererBase):
    """Render page links as a Bootstrap ``ul.pagination`` list.

    Output shape::

        <div class="navigation"><ul class="pagination">
          <li class="page-item"><a class="page-link" href="/p/1">1</a></li>
          <li class="page-item disabled"><span class="page-link">...</span></li>
          ...
        </ul></div>

    (without the whitespace). Labels are markup: tags are stripped and
    entities decoded before the text is escaped, so ``"&laquo; Previous"``
    renders as ``« Previous``. Wrap a label in ``Markup`` to insert it as is.
    """

    container_class = "navigation"
    list_class = "pagination"
    item_class = "page-item"
    link_class = "page-link"
    active_class = "active"
    disabled_class = "disabled"

    def render(
        self,
        pages: Sequence[PageLink],
        *,
        previous: PageLink | None = None,
        next: PageLink | None = None,
    ) -> Markup:
        """Return the control as a ``Markup`` string."""
        links = [link for link in (previous, *pages, next) if link is not None]
        items = Markup("").join(self.render_item(link) for link in links)
        return Markup('<div class="{}"><ul class="{}">{}</ul></div>').format(
            self.container_class, self.list_class, items
        )

    def render_item(self, link: PageLink) -> Markup:
        """Return one ``li`` element."""
        classes = [self.item_class]
        if link.is_current:
            classes.append(self.active_class)
        if link.is_disabled or not link.url:
            classes.append(self.disabled_class)
        label = self.render_label(link.label)
        if link.url and not link.is_disabled:
            inner = Markup('<a class="{}" href="{}">{}</a>').format(
                self.link_class, link.url, label
            )
        else:
            inner = Markup('<span class="{}">{}</span>').format(self.link_class, label)
        return Markup('<li class="{}">{}</li>').format(" ".join(classes), inner)

    def render_label(self, label: str) -> Markup:
        """Sanitize a label for insertion as element content."""
        if isinstance(label, Markup):
            return label
        return escape(Markup(label).striptags())
