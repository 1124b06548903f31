"""Linkup search: parameter normalization, API client, response formatting."""

from .client import LinkupClient, build_request_body, map_response
from .formatter import format_error, format_result
from .params import from_query_params, from_tool_args
from .schemas import (
    Depth,
    Image,
    OutputType,
    SearchRequest,
    SearchResult,
    SearchResultsShape,
    Source,
    SourcedAnswerShape,
    StructuredShape,
)

__all__ = [
    "LinkupClient",
    "build_request_body",
    "map_response",
    "format_error",
    "format_result",
    "from_query_params",
    "from_tool_args",
    "Depth",
    "Image",
    "OutputType",
    "SearchRequest",
    "SearchResult",
    "SearchResultsShape",
    "Source",
    "SourcedAnswerShape",
    "StructuredShape",
]
