"""SQLAlchemy helpers for paginated queries."""

from .data_layer import SQLAlchemyPageLoader

__all__ = ["SQLAlchemyPageLoader"]
