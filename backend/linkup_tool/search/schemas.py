"""
Search schemas: the canonical request record and the three result shapes.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Depth(str, Enum):
    STANDARD = "standard"
    DEEP = "deep"


class OutputType(str, Enum):
    SEARCH_RESULTS = "searchResults"
    SOURCED_ANSWER = "sourcedAnswer"
    STRUCTURED = "structured"


# ----- Request -----


class SearchRequest(BaseModel):
    """Normalized search parameters, one per call."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="Natural-language search query")
    depth: Depth = Depth.STANDARD
    output_type: OutputType = OutputType.SOURCED_ANSWER
    structured_output_schema: Optional[str] = Field(
        default=None, description="JSON schema string forwarded as-is when output_type is structured"
    )
    include_images: bool = False
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    include_domains: list[str] = Field(default_factory=list)
    exclude_domains: list[str] = Field(default_factory=list)

    @property
    def include_images_set(self) -> bool:
        """True when include_images was supplied by the caller rather than defaulted."""
        return "include_images" in self.model_fields_set


# ----- Result building blocks -----


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Unknown"
    url: str = ""
    snippet: str = ""


class Image(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = ""
    title: Optional[str] = None
    description: Optional[str] = None


# ----- Result variants (tagged by output_type) -----


class SearchResultsShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_type: Literal[OutputType.SEARCH_RESULTS] = OutputType.SEARCH_RESULTS
    # Raw upstream value, or the "No results found" sentinel when the key was absent
    results: Any
    sources: list[Source] = Field(default_factory=list)
    images: Optional[list[Image]] = None


class SourcedAnswerShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_type: Literal[OutputType.SOURCED_ANSWER] = OutputType.SOURCED_ANSWER
    answer: str
    sources: list[Source] = Field(default_factory=list)
    images: Optional[list[Image]] = None


class StructuredShape(BaseModel):
    """Opaque pass-through of the decoded upstream body."""

    model_config = ConfigDict(frozen=True)

    output_type: Literal[OutputType.STRUCTURED] = OutputType.STRUCTURED
    data: Any


SearchResult = Annotated[
    Union[SearchResultsShape, SourcedAnswerShape, StructuredShape],
    Field(discriminator="output_type"),
]
