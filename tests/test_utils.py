import pytest

from fastapi_paginator.utils import build_url_pattern, parse_page_params


def test_parse_page_params():
    params = parse_page_params(
        {"page[number]": "2", "page[size]": "5", "page[cursor]": "abc", "q": "x", "sort": None}
    )

    assert params == {"page": {"number": 2, "size": 5, "cursor": "abc"}}


def test_parse_page_params_empty():
    assert parse_page_params({}) == {"page": {}}


@pytest.mark.parametrize(
    ("url", "param", "expected"),
    [
        ("/items", "page", "/items?page=(:num)"),
        ("/items?page=3&q=a", "page", "/items?q=a&page=(:num)"),
        ("/items?q=a+b&page=3", "page", "/items?q=a+b&page=(:num)"),
        ("/items#top", "page", "/items?page=(:num)#top"),
        (
            "http://example.com/items?page%5Bnumber%5D=4",
            "page[number]",
            "http://example.com/items?page%5Bnumber%5D=(:num)",
        ),
    ],
)
def test_build_url_pattern(url, param, expected):
    assert build_url_pattern(url, param) == expected
