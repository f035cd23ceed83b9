import pytest

from fastapi_paginator import PageNumberPagination, Paginator

BASE_URL = "http://testserver/api/articles?page%5Bnumber%5D=2&page%5Bsize%5D=10"
PATTERN_PREFIX = "http://testserver/api/articles?page%5Bsize%5D=10&page%5Bnumber%5D="


@pytest.mark.parametrize(
    ("page", "expected"),
    [
        ({}, (1, 10)),
        ({"number": 3, "size": 5}, (3, 5)),
        ({"number": "abc", "size": "x"}, (1, 10)),
        ({"number": 0, "size": -1}, (1, 10)),
        ({"number": 2, "size": 1000}, (2, 100)),
    ],
)
def test_get_page_values(page, expected):
    assert PageNumberPagination().get_page_values({"page": page}) == expected


def test_paginate_queryset():
    pagination = PageNumberPagination()
    items = list(range(25))

    assert pagination.paginate_queryset(items, {"page": {"number": 3, "size": 10}}) == [
        20, 21, 22, 23, 24
    ]
    assert pagination.paginate_queryset(items, {"page": {"number": 4, "size": 10}}) == []
    assert pagination.paginate_queryset(items, {}) == list(range(10))


def test_get_links():
    links = PageNumberPagination().get_links(
        total=95,
        params={"page": {"number": 2, "size": 10}, "base_url": BASE_URL},
    )

    assert links == {
        "self": PATTERN_PREFIX + "2",
        "first": PATTERN_PREFIX + "1",
        "last": PATTERN_PREFIX + "10",
        "prev": PATTERN_PREFIX + "1",
        "next": PATTERN_PREFIX + "3",
    }


def test_get_links_on_empty_collection():
    links = PageNumberPagination().get_links(
        total=0,
        params={"page": {}, "base_url": "http://testserver/api/articles"},
    )

    assert links == {
        "self": "http://testserver/api/articles?page%5Bnumber%5D=1",
        "first": "http://testserver/api/articles?page%5Bnumber%5D=1",
        "last": "http://testserver/api/articles?page%5Bnumber%5D=1",
    }


def test_get_links_without_base_url():
    assert PageNumberPagination().get_links(total=95, params={"page": {}}) == {}


def test_get_meta():
    meta = PageNumberPagination().get_meta(
        total=95, params={"page": {"number": 10, "size": 10}}
    )

    assert meta == {
        "total_items": 95,
        "items_per_page": 10,
        "current_page": 10,
        "num_pages": 10,
        "first_item": 91,
        "last_item": 95,
    }


def test_get_paginator_uses_class_settings():
    class ShortPagination(PageNumberPagination):
        default_size = 5
        max_pages_to_show = 5

    paginator = ShortPagination().get_paginator(total=65, params={"page": {"number": 5}})

    assert isinstance(paginator, Paginator)
    assert paginator.items_per_page == 5
    assert paginator.max_pages_to_show == 5
    assert [page.number for page in paginator.get_pages()] == [1, "...", 4, 5, 6, "...", 13]
