"""
Agent-facing tool: string args in, formatted text out.

tool_call() never raises; every failure is returned as an error string.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from linkup_tool.config import Settings, get_settings
from linkup_tool.search.client import LinkupClient
from linkup_tool.search.formatter import format_error, format_result
from linkup_tool.search.params import from_tool_args
from linkup_tool.search.schemas import SearchRequest

logger = logging.getLogger(__name__)

TOOL_NAME = "linkup_search"

TOOL_DEFINITION = {
    "type": "function",
    "function": {
        "name": TOOL_NAME,
        "description": (
            "Search the web with Linkup. Returns a sourced answer, a list of search results, "
            "or structured JSON matching a supplied schema."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "The search query."},
                "depth": {
                    "type": "string",
                    "enum": ["standard", "deep"],
                    "description": "Search thoroughness. Defaults to standard.",
                },
                "outputType": {
                    "type": "string",
                    "enum": ["searchResults", "sourcedAnswer", "structured"],
                    "description": "Shape of the response. Defaults to sourcedAnswer.",
                },
                "structuredOutputSchema": {
                    "type": "string",
                    "description": "JSON schema string; required when outputType is structured.",
                },
                "includeImages": {"type": "string", "description": "\"true\" to include images."},
                "fromDate": {"type": "string", "description": "Only results after this date (YYYY-MM-DD)."},
                "toDate": {"type": "string", "description": "Only results before this date (YYYY-MM-DD)."},
                "includeDomains": {
                    "type": "string",
                    "description": "Domains to restrict to: JSON array or comma-separated list.",
                },
                "excludeDomains": {
                    "type": "string",
                    "description": "Domains to leave out: JSON array or comma-separated list.",
                },
            },
            "required": ["query"],
        },
    },
}


def search_and_format(request: SearchRequest, client: LinkupClient) -> str:
    """Run one search and format it. Errors propagate to the caller."""
    return format_result(client.search(request))


def tool_call(
    args: Optional[Mapping[str, Any]],
    settings: Optional[Settings] = None,
    client: Optional[LinkupClient] = None,
) -> str:
    try:
        request = from_tool_args(args)
        client = client or LinkupClient(settings or get_settings())
        return search_and_format(request, client)
    except Exception as e:
        logger.warning("Search tool call failed: %s", e)
        return format_error(e)
