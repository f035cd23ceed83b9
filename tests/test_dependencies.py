import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from fastapi_paginator.dependencies import PageParams, page_params, paginator_from_request


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()

    @app.get("/items")
    def list_items(request: Request, params: PageParams = Depends(page_params)) -> dict:
        paginator = paginator_from_request(request, 20, params, max_pages_to_show=3)
        return {
            "url_pattern": paginator.url_pattern,
            "current_page": paginator.current_page,
            "items_per_page": paginator.items_per_page,
            "next_url": paginator.next_url,
            "pages": [page.number for page in paginator.get_pages()],
        }

    return TestClient(app)


def test_paginator_from_request(client):
    response = client.get("/items", params={"page": 2, "per_page": 5, "q": "x"})

    assert response.status_code == 200
    assert response.json() == {
        "url_pattern": "http://testserver/items?per_page=5&q=x&page=(:num)",
        "current_page": 2,
        "items_per_page": 5,
        "next_url": "http://testserver/items?per_page=5&q=x&page=3",
        "pages": [1, 2, "...", 4],
    }


def test_page_params_defaults(client):
    body = client.get("/items").json()

    assert body["current_page"] == 1
    assert body["items_per_page"] == 10


@pytest.mark.parametrize("query", [{"page": 0}, {"per_page": 0}, {"per_page": 101}, {"page": "x"}])
def test_page_params_validation(client, query):
    assert client.get("/items", params=query).status_code == 422
