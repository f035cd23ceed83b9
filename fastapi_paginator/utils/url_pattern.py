"""Helpers for building page URL patterns from request URLs."""

from __future__ import annotations

from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from fastapi_paginator.core.paginator import Paginator


def build_url_pattern(url: str, param: str) -> str:
    """Return ``url`` with query parameter ``param`` set to ``(:num)``.

    Other query parameters are kept in order; an existing ``param`` is
    replaced and the placeholder is appended last::

        build_url_pattern("/items?page=3&q=a", "page")  # "/items?q=a&page=(:num)"
    """
    split = urlsplit(url)
    query = [
        (key, value)
        for key, value in parse_qsl(split.query, keep_blank_values=True)
        if key != param
    ]
    placeholder = f"{quote_plus(param)}={Paginator.NUM_PLACEHOLDER}"
    encoded = urlencode(query)
    query_string = f"{encoded}&{placeholder}" if encoded else placeholder
    return urlunsplit((split.scheme, split.netloc, split.path, query_string, split.fragment))
