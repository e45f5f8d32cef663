"""JSON Schema contracts for inbound, already-parsed mappings.

Wraps jsonschema Draft7 validation so malformed input fails fast with a
single readable error instead of surfacing later as a resolution failure.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from jsonschema import Draft7Validator

from constants import Constants

from .errors import SchemaError

_ROLE_KEYS = [
    "l1_cross_domain_messenger",
    "l1_erc721_bridge",
    "l1_standard_bridge",
    "l2_output_oracle",
    "optimism_mintable_erc20_factory",
    "optimism_portal",
    "system_config",
]

ADDRESS_SET_SCHEMA: Dict[str, Any] = {
    "type": ["object", "null"],
    "additionalProperties": {"type": "string", "pattern": Constants.ADDRESS_PATTERN},
}

CONTRACT_IMPLEMENTATIONS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {key: ADDRESS_SET_SCHEMA for key in _ROLE_KEYS},
    "additionalProperties": False,
}

CONTRACT_VERSIONS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {key: {"type": "string"} for key in _ROLE_KEYS},
    "additionalProperties": False,
}


def validate_payload(schema: Dict[str, Any], data: Mapping[str, Any], what: str) -> None:
    """Validate ``data`` strictly and raise on the first error.

    Args:
        schema: Draft-07 JSON Schema dict.
        data:   Parsed payload to validate.
        what:   Human readable name of the payload for the error message.
    """
    instance = dict(data) if isinstance(data, Mapping) else data
    validator = Draft7Validator(schema)
    errs = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if errs:
        first = errs[0]
        path = "/".join([str(p) for p in first.path])
        raise SchemaError(f"Invalid {what} at '{path}': {first.message}")
