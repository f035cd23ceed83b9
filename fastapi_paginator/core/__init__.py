"""Core paginator and error helpers."""

from .errors import ErrorDocumentBuilder, InvalidConfiguration, PaginatorError
from .paginator import Paginator

__all__ = ["ErrorDocumentBuilder", "InvalidConfiguration", "Paginator", "PaginatorError"]
