"""Shared argument helpers for the Solana MCP tools."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

COMMITMENT_LEVELS = ("finalized", "confirmed", "processed")
ACCOUNT_ENCODINGS = ("base58", "base64", "jsonParsed")

_JSON_TYPES = {
    "string": (str,),
    "integer": (int,),
    "boolean": (bool,),
    "number": (int, float),
}


def split_csv(value: str) -> List[str]:
    """Split a comma-delimited string, trimming whitespace and dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def build_options(**fields: Any) -> Dict[str, Any]:
    """Return only the supplied fields, keeping declaration order."""
    return {key: value for key, value in fields.items() if value is not None}


def with_options(params: List[Any], options: Dict[str, Any]) -> List[Any]:
    """Append a trailing options object when it has any entries."""
    if options:
        return [*params, options]
    return params


def _matches_type(value: Any, expected: str) -> bool:
    allowed = _JSON_TYPES.get(expected)
    if allowed is None:
        return True
    # bool is an int subclass; JSON keeps them apart.
    if isinstance(value, bool) and expected != "boolean":
        return False
    return isinstance(value, allowed)


def validate_arguments(schema: Mapping[str, Any], arguments: Mapping[str, Any]) -> Optional[str]:
    """
    Check arguments against a flat object schema.

    Only the basics are enforced: required keys, unexpected keys, scalar types,
    enums and integer bounds.

    Returns:
        A short description of the first problem found, or None when valid.
    """
    properties: Mapping[str, Any] = schema.get("properties", {})
    for name in schema.get("required", []):
        if arguments.get(name) is None:
            return f"Missing required argument: {name}"

    for name, value in arguments.items():
        prop = properties.get(name)
        if prop is None:
            if schema.get("additionalProperties", True) is False:
                return f"Unexpected argument: {name}"
            continue
        if value is None:
            continue
        expected = prop.get("type")
        if expected and not _matches_type(value, expected):
            return f"Argument {name} must be of type {expected}"
        enum = prop.get("enum")
        if enum is not None and value not in enum:
            return f"Argument {name} must be one of: {', '.join(map(str, enum))}"
        if "minimum" in prop and value < prop["minimum"]:
            return f"Argument {name} must be >= {prop['minimum']}"
        if "maximum" in prop and value > prop["maximum"]:
            return f"Argument {name} must be <= {prop['maximum']}"
    return None
