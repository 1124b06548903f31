"""Tests for search schemas."""

import pytest
from pydantic import TypeAdapter, ValidationError

from linkup_tool.search.schemas import (
    Depth,
    OutputType,
    SearchRequest,
    SearchResult,
    SearchResultsShape,
    Source,
    SourcedAnswerShape,
    StructuredShape,
)


class TestSearchRequest:
    """Canonical request record."""

    def test_defaults(self):
        request = SearchRequest(query="q")
        assert request.depth == Depth.STANDARD
        assert request.output_type == OutputType.SOURCED_ANSWER
        assert request.include_images is False
        assert request.structured_output_schema is None
        assert request.from_date is None
        assert request.include_domains == []

    def test_query_required(self):
        with pytest.raises(ValidationError):
            SearchRequest()

    def test_query_non_empty(self):
        with pytest.raises(ValidationError):
            SearchRequest(query="")

    def test_enum_from_wire_value(self):
        request = SearchRequest(query="q", depth="deep", output_type="searchResults")
        assert request.depth == Depth.DEEP
        assert request.output_type == OutputType.SEARCH_RESULTS

    def test_frozen(self):
        request = SearchRequest(query="q")
        with pytest.raises(ValidationError):
            request.query = "other"


class TestSource:
    def test_defaults(self):
        assert Source().model_dump() == {"name": "Unknown", "url": "", "snippet": ""}


class TestSearchResultUnion:
    """Variants are discriminated by output_type."""

    def test_each_variant_carries_its_tag(self):
        assert SearchResultsShape(results=[]).output_type == OutputType.SEARCH_RESULTS
        assert SourcedAnswerShape(answer="a").output_type == OutputType.SOURCED_ANSWER
        assert StructuredShape(data={}).output_type == OutputType.STRUCTURED

    def test_validate_by_tag(self):
        adapter = TypeAdapter(SearchResult)
        result = adapter.validate_python({"output_type": OutputType.SOURCED_ANSWER, "answer": "a"})
        assert isinstance(result, SourcedAnswerShape)
        result = adapter.validate_python({"output_type": OutputType.SEARCH_RESULTS, "results": "No results found"})
        assert isinstance(result, SearchResultsShape)
        assert result.results == "No results found"
