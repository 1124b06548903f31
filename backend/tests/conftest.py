"""Pytest fixtures for the Linkup search tool."""

from unittest.mock import MagicMock

import pytest

from linkup_tool.config import Settings
from linkup_tool.search.client import LinkupClient


@pytest.fixture
def settings():
    return Settings(_env_file=None, linkup_api_key="test-key")


@pytest.fixture
def settings_without_key():
    return Settings(_env_file=None, linkup_api_key="")


def _make_response(json_data=None, status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Build a fake requests.Response."""
    return _make_response


@pytest.fixture
def session():
    """requests.Session stand-in; set session.post.return_value per test."""
    return MagicMock()


@pytest.fixture
def client(settings, session):
    return LinkupClient(settings, session=session)


@pytest.fixture
def sourced_answer_body():
    return {
        "answer": "The capital of France is Paris.",
        "sources": [
            {"name": "Paris - Wikipedia", "url": "https://en.wikipedia.org/wiki/Paris", "snippet": "Paris is the capital."},
            {"title": "France facts", "url": "https://example.com/france"},
        ],
    }


@pytest.fixture
def search_results_body():
    return {
        "results": [
            {"type": "text", "name": "Paris", "url": "https://paris.fr", "content": "Official site."},
            {"type": "text", "title": "Louvre", "url": "https://louvre.fr", "description": "Museum."},
        ],
        "images": [
            {"url": "https://img.example.com/eiffel.jpg", "title": "Eiffel Tower", "description": "At night"},
            {"url": "https://img.example.com/seine.jpg"},
        ],
    }
