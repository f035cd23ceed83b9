"""Pydantic schemas for page descriptors and pagination metadata."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

ELLIPSIS = "..."


class PageDescriptor(BaseModel):
    """One entry of the page list: a page number or an ellipsis marker."""

    model_config = ConfigDict(frozen=True)

    number: Union[int, str]
    url: Optional[str] = None
    is_current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.number == ELLIPSIS


class PageLink(BaseModel):
    """Renderer input for a single list item.

    ``label`` is a ``str`` treated as markup, or a ``markupsafe.Markup``
    that is inserted verbatim.
    """

    model_config = ConfigDict(frozen=True)

    label: Any
    url: Optional[str] = None
    is_current: bool = False
    is_disabled: bool = False


class PaginationMeta(BaseModel):
    """Pagination metadata for JSON responses."""

    total_items: int
    items_per_page: int
    current_page: int
    num_pages: int
    first_item: Optional[int] = None
    last_item: Optional[int] = None
