"""Page-window pagination for FastAPI applications."""

from .core.errors import InvalidConfiguration, PaginatorError
from .core.paginator import Paginator
from .pagination import PageNumberPagination
from .rendering import BootstrapRenderer, RendererBase
from .schemas import PageDescriptor, PageLink, PaginationMeta

__all__ = [
    "BootstrapRenderer",
    "InvalidConfiguration",
    "PageDescriptor",
    "PageLink",
    "PageNumberPagination",
    "Paginator",
    "PaginationMeta",
    "PaginatorError",
    "RendererBase",
]
