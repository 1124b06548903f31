"""Error types raised by the Linkup search tool."""


class LinkupToolError(Exception):
    """Base class for all tool errors."""


class ConfigurationError(LinkupToolError):
    """Required configuration (the API credential) is missing."""


class ValidationError(LinkupToolError):
    """Caller input is missing or malformed."""


class SearchClientError(LinkupToolError):
    """The search call failed at the network or decoding level."""


class UpstreamError(SearchClientError):
    """The Linkup API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Linkup API error: {status_code} - {body}")
