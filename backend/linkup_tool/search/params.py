"""
Parameter normalization: loosely-typed tool args or URL query params -> SearchRequest.

Domain lists accept two wire encodings. Tool/event args try a JSON array first
and fall back to a comma-separated string; URL query params are always
comma-separated.
"""

import json
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from linkup_tool.errors import ValidationError
from linkup_tool.search.schemas import SearchRequest

MISSING_QUERY_MESSAGE = "Missing required parameter: query"

TRUE_VALUES = ("true", "1")

# Raw (camelCase) parameter name -> SearchRequest field
_PASSTHROUGH_FIELDS = {
    "depth": "depth",
    "outputType": "output_type",
    "structuredOutputSchema": "structured_output_schema",
    "fromDate": "from_date",
    "toDate": "to_date",
}


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def parse_bool(value: Any) -> bool:
    """True iff the value is a real True or the text "true" / "1"."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES


def split_domains(value: str) -> list[str]:
    return [d.strip() for d in value.split(",") if d.strip()]


def parse_domains(value: Any) -> list[str]:
    """Decode a JSON-array string, else comma-split. Lists pass through trimmed."""
    if isinstance(value, (list, tuple)):
        return [str(d).strip() for d in value if str(d).strip()]
    text = str(value).strip()
    if text.startswith("["):
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, list):
            return [str(d).strip() for d in decoded if str(d).strip()]
    return split_domains(text)


def _build(fields: dict[str, Any]) -> SearchRequest:
    try:
        return SearchRequest(**fields)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(f"Invalid search parameters: {errors}") from e


def _collect(raw: Mapping[str, Any], domain_parser) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for raw_key, field in _PASSTHROUGH_FIELDS.items():
        value = raw.get(raw_key)
        if _present(value):
            fields[field] = value.strip() if isinstance(value, str) else value
    if _present(raw.get("includeImages")):
        fields["include_images"] = parse_bool(raw["includeImages"])
    for raw_key, field in (("includeDomains", "include_domains"), ("excludeDomains", "exclude_domains")):
        if _present(raw.get(raw_key)):
            fields[field] = domain_parser(raw[raw_key])
    return fields


def from_tool_args(args: Optional[Mapping[str, Any]]) -> SearchRequest:
    """
    Normalize tool-call / event args. A missing or blank query is an error;
    it is never defaulted on this path.
    """
    args = args or {}
    if not isinstance(args, Mapping):
        raise ValidationError("Invalid arguments: expected an object")
    query = args.get("query")
    if not _present(query):
        raise ValidationError(MISSING_QUERY_MESSAGE)
    fields = _collect(args, parse_domains)
    fields["query"] = str(query).strip()
    return _build(fields)


def from_query_params(
    params: Mapping[str, Any],
    default_query: Optional[str] = None,
) -> SearchRequest:
    """
    Normalize URL query params (domains comma-separated). When default_query is
    given, a missing query falls back to it.
    """
    query = params.get("query")
    if not _present(query):
        if default_query is None:
            raise ValidationError(MISSING_QUERY_MESSAGE)
        query = default_query
    fields = _collect(params, lambda v: split_domains(str(v)))
    fields["query"] = str(query).strip()
    return _build(fields)
