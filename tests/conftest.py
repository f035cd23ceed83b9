import pytest

from fastapi_paginator import Paginator


@pytest.fixture
def paginator() -> Paginator:
    """100 items, 10 per page, sitting on page 5."""
    return Paginator(100, 10, 5, "/example/page(:num)")
