"""
Linkup search dev server: GET / runs one search and returns the formatted text.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import PlainTextResponse

from linkup_tool import __version__
from linkup_tool.config import Settings, get_settings
from linkup_tool.search.client import LinkupClient
from linkup_tool.search.params import from_query_params
from linkup_tool.tool import search_and_format

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "What is the capital of France?"

app = FastAPI(title="Linkup Search Tool", version=__version__)


def get_client(settings: Settings = Depends(get_settings)):
    client = LinkupClient(settings)
    try:
        yield client
    finally:
        client.close()


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", response_class=PlainTextResponse)
def search(
    query: Optional[str] = None,
    depth: Optional[str] = None,
    output_type: Optional[str] = Query(default=None, alias="outputType"),
    include_images: Optional[str] = Query(default=None, alias="includeImages"),
    from_date: Optional[str] = Query(default=None, alias="fromDate"),
    to_date: Optional[str] = Query(default=None, alias="toDate"),
    include_domains: Optional[str] = Query(default=None, alias="includeDomains"),
    exclude_domains: Optional[str] = Query(default=None, alias="excludeDomains"),
    client: LinkupClient = Depends(get_client),
):
    """
    Missing query falls back to a sample question. Domains are comma-separated.
    Any failure is a 500 with "Error: {message}".
    """
    params = {
        "query": query,
        "depth": depth,
        "outputType": output_type,
        "includeImages": include_images,
        "fromDate": from_date,
        "toDate": to_date,
        "includeDomains": include_domains,
        "excludeDomains": exclude_domains,
    }
    try:
        request = from_query_params(params, default_query=DEFAULT_QUERY)
        return PlainTextResponse(search_and_format(request, client), status_code=200)
    except Exception as e:
        logger.warning("Dev server search failed: %s", e)
        return PlainTextResponse(f"Error: {e}", status_code=500)
