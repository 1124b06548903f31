"""Tests for the dev server."""

import pytest
from fastapi.testclient import TestClient

from linkup_tool.main import DEFAULT_QUERY, app, get_client


@pytest.fixture
def api(client):
    app.dependency_overrides[get_client] = lambda: client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(api):
    assert api.get("/health").json() == {"status": "ok"}


def test_search_returns_text(api, session, make_response):
    session.post.return_value = make_response({"answer": "Paris", "sources": []})
    response = api.get("/", params={"query": "capital of France"})
    assert response.status_code == 200
    assert response.text == "Answer:\n\nParis\n\n"


def test_missing_query_uses_sample_question(api, session, make_response):
    session.post.return_value = make_response({"answer": "Paris"})
    response = api.get("/")
    assert response.status_code == 200
    assert session.post.call_args.kwargs["json"]["q"] == DEFAULT_QUERY


def test_query_params_forwarded(api, session, make_response):
    session.post.return_value = make_response({"results": []})
    api.get(
        "/",
        params={
            "query": "q",
            "depth": "deep",
            "outputType": "searchResults",
            "includeImages": "true",
            "includeDomains": "a.com,b.com",
            "fromDate": "2024-01-01",
        },
    )
    body = session.post.call_args.kwargs["json"]
    assert body == {
        "q": "q",
        "depth": "deep",
        "outputType": "searchResults",
        "includeImages": "true",
        "fromDate": "2024-01-01",
        "includeDomains": ["a.com", "b.com"],
    }


def test_upstream_failure_is_500(api, session, make_response):
    session.post.return_value = make_response(status_code=500, text="oops")
    response = api.get("/", params={"query": "q"})
    assert response.status_code == 500
    assert response.text == "Error: Linkup API error: 500 - oops"


def test_invalid_depth_is_500(api, session):
    response = api.get("/", params={"query": "q", "depth": "shallow"})
    assert response.status_code == 500
    assert response.text.startswith("Error: Invalid search parameters")
    session.post.assert_not_called()
