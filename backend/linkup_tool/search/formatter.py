"""
Response formatting: result shape -> text handed back to the caller.
"""

import json
from typing import Optional

from linkup_tool.search.schemas import (
    Image,
    SearchResult,
    SearchResultsShape,
    Source,
    SourcedAnswerShape,
    StructuredShape,
)

UNKNOWN_ERROR = "An unknown error occurred while searching"


def _format_sources(sources: list[Source]) -> str:
    out = ""
    for i, source in enumerate(sources, start=1):
        out += f"{i}. {source.name}\n"
        out += f"   URL: {source.url}\n"
        if source.snippet:
            out += f"   {source.snippet}\n"
        out += "\n"
    return out


def _format_images(images: Optional[list[Image]]) -> str:
    if not images:
        return ""
    out = "\nImages:\n"
    for i, image in enumerate(images, start=1):
        out += f"{i}. {image.title or 'Image'}\n"
        out += f"   URL: {image.url}\n"
        if image.description:
            out += f"   {image.description}\n"
        out += "\n"
    return out


def format_result(result: SearchResult) -> str:
    """Render a result shape as indented JSON (structured) or a text block."""
    if isinstance(result, StructuredShape):
        return json.dumps(result.data, indent=2)

    if isinstance(result, SearchResultsShape):
        return "Search Results:\n\n" + _format_sources(result.sources) + _format_images(result.images)

    if isinstance(result, SourcedAnswerShape):
        out = f"Answer:\n\n{result.answer}\n\n"
        if result.sources:
            out += "Sources:\n" + _format_sources(result.sources)
        return out + _format_images(result.images)

    raise TypeError(f"Unsupported result type: {type(result).__name__}")


def format_error(error: BaseException) -> str:
    message = str(error)
    if not message:
        return UNKNOWN_ERROR
    return f"Error performing search: {message}"
