"""
Event-style handler.

Payload: {"args": {...raw string params...}, "secrets": {"LINKUP_API_KEY": "..."}}
Response: {"statusCode": int, "body": <JSON-encoded string>}
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

import requests

from linkup_tool.config import Settings, get_settings
from linkup_tool.errors import ValidationError
from linkup_tool.search.client import LinkupClient
from linkup_tool.search.params import from_tool_args
from linkup_tool.tool import search_and_format

logger = logging.getLogger(__name__)

SECRET_KEY = "LINKUP_API_KEY"

Event = Union[str, bytes, Mapping[str, Any]]


def _response(status_code: int, message: str) -> dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(message)}


def parse_event(event: Event) -> dict[str, Any]:
    """Decode the event envelope. A mapping with a string "body" is unwrapped."""
    if isinstance(event, Mapping) and isinstance(event.get("body"), (str, bytes)):
        event = event["body"]
    if isinstance(event, (str, bytes)):
        try:
            event = json.loads(event) if event else {}
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid request body: {e}") from e
    if not isinstance(event, Mapping):
        raise ValidationError("Invalid request body: expected a JSON object")
    return dict(event)


def handler(
    event: Event,
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    """Handle one event. The secret in the payload applies to this call only."""
    try:
        payload = parse_event(event)
        request = from_tool_args(payload.get("args") or {})
    except ValidationError as e:
        logger.warning("Rejected event: %s", e)
        return _response(400, str(e))

    settings = settings or get_settings()
    secrets = payload.get("secrets") or {}
    if isinstance(secrets, Mapping) and secrets.get(SECRET_KEY):
        settings = settings.with_api_key(secrets[SECRET_KEY])

    client = LinkupClient(settings, session=session)
    try:
        result = search_and_format(request, client)
    except Exception as e:
        logger.warning("Event search failed: %s", e)
        return _response(500, str(e))
    finally:
        if session is None:
            client.close()
    return _response(200, result)
