"""Pagination strategies for list endpoints."""

from .base import PaginationBase
from .page_number import PageNumberPagination

__all__ = ["PageNumberPagination", "PaginationBase"]
