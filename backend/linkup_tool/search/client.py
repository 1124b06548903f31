"""
Linkup Search API client. Credential comes from the Settings passed in; one
requests.Session per client.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from linkup_tool.config import Settings
from linkup_tool.errors import ConfigurationError, SearchClientError, UpstreamError
from linkup_tool.search.schemas import (
    Image,
    OutputType,
    SearchRequest,
    SearchResult,
    SearchResultsShape,
    Source,
    SourcedAnswerShape,
    StructuredShape,
)

logger = logging.getLogger(__name__)

NO_RESULTS = "No results found"
NO_ANSWER = "No answer found"

# Ordered fallback keys per Source field; first non-empty value wins
NAME_KEYS = ("name", "title")
URL_KEYS = ("url",)
RESULT_SNIPPET_KEYS = ("content", "snippet", "description")
SOURCE_SNIPPET_KEYS = ("snippet", "description")


def _first(item: Mapping[str, Any], keys: tuple[str, ...], default: str) -> str:
    for key in keys:
        value = item.get(key)
        if value:
            return str(value)
    return default


def to_source(item: Any, snippet_keys: tuple[str, ...]) -> Source:
    if not isinstance(item, Mapping):
        item = {}
    return Source(
        name=_first(item, NAME_KEYS, "Unknown"),
        url=_first(item, URL_KEYS, ""),
        snippet=_first(item, snippet_keys, ""),
    )


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def to_images(raw: Any) -> Optional[list[Image]]:
    if not raw or not isinstance(raw, list):
        return None
    return [
        Image(
            url=str(img.get("url") or ""),
            title=_optional_text(img.get("title")),
            description=_optional_text(img.get("description")),
        )
        for img in raw
        if isinstance(img, Mapping)
    ]


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def build_request_body(request: SearchRequest) -> dict[str, Any]:
    """Request body for the Linkup API. Optional fields only when supplied and non-empty."""
    body: dict[str, Any] = {
        "q": request.query,
        "depth": request.depth.value,
        "outputType": request.output_type.value,
    }
    if request.structured_output_schema:
        body["structuredOutputSchema"] = request.structured_output_schema
    if request.include_images_set:
        body["includeImages"] = "true" if request.include_images else "false"
    if request.from_date:
        body["fromDate"] = request.from_date
    if request.to_date:
        body["toDate"] = request.to_date
    if request.include_domains:
        body["includeDomains"] = list(request.include_domains)
    if request.exclude_domains:
        body["excludeDomains"] = list(request.exclude_domains)
    return body


def map_response(data: Any, output_type: OutputType) -> SearchResult:
    """Map a decoded Linkup response onto the shape for the requested output type."""
    if output_type == OutputType.STRUCTURED:
        return StructuredShape(data=data)

    if not isinstance(data, Mapping):
        data = {}

    if output_type == OutputType.SEARCH_RESULTS:
        raw_results = data.get("results")
        entries = _as_list(raw_results)
        return SearchResultsShape(
            results=raw_results if raw_results is not None else NO_RESULTS,
            sources=[to_source(r, RESULT_SNIPPET_KEYS) for r in entries],
            images=to_images(data.get("images")),
        )

    return SourcedAnswerShape(
        answer=str(data.get("answer") or NO_ANSWER),
        sources=[to_source(s, SOURCE_SNIPPET_KEYS) for s in _as_list(data.get("sources"))],
        images=to_images(data.get("images")),
    )


class LinkupClient:
    """Performs one POST per search and maps the response."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self._session = session or requests.Session()

    def _api_key(self) -> str:
        api_key = self.settings.linkup_api_key
        if not api_key:
            raise ConfigurationError("LINKUP_API_KEY environment variable is not set")
        return api_key

    def search(self, request: SearchRequest) -> SearchResult:
        api_key = self._api_key()
        body = build_request_body(request)
        headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
        logger.debug("Linkup search: depth=%s outputType=%s", body["depth"], body["outputType"])

        try:
            response = self._session.post(
                self.settings.linkup_api_url,
                json=body,
                headers=headers,
                timeout=self.settings.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Linkup request failed: %s", e)
            raise SearchClientError(f"Failed to search with Linkup: {e}") from e

        if not response.ok:
            logger.warning("Linkup API returned HTTP %s", response.status_code)
            raise UpstreamError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise SearchClientError(f"Failed to search with Linkup: {e}") from e

        try:
            return map_response(data, request.output_type)
        except PydanticValidationError as e:
            raise SearchClientError(f"Failed to search with Linkup: {e}") from e

    def close(self) -> None:
        self._session.close()
