"""Pydantic schemas for pagination output."""

from .page import ELLIPSIS, PageDescriptor, PageLink, PaginationMeta

__all__ = [
    "ELLIPSIS",
    "PageDescriptor",
    "PageLink",
    "PaginationMeta",
]
