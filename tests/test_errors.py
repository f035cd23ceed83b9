import pytest

from fastapi_paginator import InvalidConfiguration, Paginator
from fastapi_paginator.core import ErrorDocumentBuilder


def test_error_object_source_parameter():
    builder = ErrorDocumentBuilder()

    assert builder.error_object(status=400, title="Bad", parameter="page") == {
        "status": "400",
        "title": "Bad",
        "source": {"parameter": "page"},
    }


def test_error_from_invalid_configuration():
    with pytest.raises(InvalidConfiguration) as excinfo:
        Paginator(10, 1, 1).max_pages_to_show = 1

    assert excinfo.value.parameter == "max_pages_to_show"
    assert ErrorDocumentBuilder().error_from_exception(excinfo.value) == {
        "status": "400",
        "title": "Invalid Pagination Configuration",
        "detail": "max_pages_to_show cannot be less than 3.",
        "source": {"parameter": "max_pages_to_show"},
    }


def test_error_from_other_exception():
    assert ErrorDocumentBuilder().error_from_exception(RuntimeError("boom")) == {
        "status": "500",
        "title": "Internal Server Error",
        "detail": "boom",
    }


def test_error_document():
    assert ErrorDocumentBuilder().error_document([{"status": "500"}]) == {
        "errors": [{"status": "500"}]
    }
