"""Utility helpers for query parsing and page URLs."""

from .query_params import parse_page_params
from .url_pattern import build_url_pattern

__all__ = ["build_url_pattern", "parse_page_params"]
