# -*- coding: utf-8 -*-
"""
Envelope Builder

Wraps a processJson object from GET /Api/v1/Processes/{id} into the body
required by PUT /Api/v1/Processes/{id}.
"""

import json
from collections.abc import Mapping
from typing import Any, Optional

from promapp.envelope.errors import EnvelopeErrorCode, InvalidArgument
from promapp.envelope.types import UpdateEnvelope


def _find_non_string_key(value: Any, path: str = "$") -> Optional[str]:
    """Return the location of the first mapping key that is not a str, if any"""
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                return f"{path}[{key!r}]"
            found = _find_non_string_key(item, f"{path}.{key}")
            if found:
                return found
    elif isinstance(value, (list, tuple)):
        for idx, item in enumerate(value):
            found = _find_non_string_key(item, f"{path}[{idx}]")
            if found:
                return found
    return None


def serialize_process_json(process_json: Mapping) -> str:
    """
    Serialize processJson as compact standard JSON.

    Compact separators, insertion key order, non-ASCII left as is. Keys must
    be strings at every level; json.dumps would otherwise coerce them and the
    result would no longer decode back to the input. The update endpoint
    expects this string, not a nested object.
    """
    bad_key = _find_non_string_key(process_json)
    if bad_key:
        raise InvalidArgument.from_code(
            EnvelopeErrorCode.UNSERIALIZABLE_PROCESS_JSON, reason=f"non-string key at {bad_key}"
        )

    try:
        return json.dumps(
            dict(process_json),
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise InvalidArgument.from_code(
            EnvelopeErrorCode.UNSERIALIZABLE_PROCESS_JSON, reason=str(e)
        ) from e


def build_update_envelope(process_json: Any, change_description: Any = "") -> UpdateEnvelope:
    """
    Build the update envelope for a process.

    Args:
        process_json: processJson mapping from the GET response (not modified)
        change_description: description of the changes being made

    Returns:
        UpdateEnvelope

    Raises:
        InvalidArgument: process_json is not a mapping, change_description is
            not a string, or process_json holds keys or values JSON cannot
            encode faithfully

    Examples:
        >>> envelope = build_update_envelope({"Name": "Proc1", "Id": 7}, "fix typo")
        >>> envelope.process_json
        '{"Name":"Proc1","Id":7}'
    """
    if not isinstance(process_json, Mapping):
        raise InvalidArgument.from_code(
            EnvelopeErrorCode.INVALID_PROCESS_JSON, type_name=type(process_json).__name__
        )

    if not isinstance(change_description, str):
        raise InvalidArgument.from_code(
            EnvelopeErrorCode.INVALID_CHANGE_DESCRIPTION, type_name=type(change_description).__name__
        )

    return UpdateEnvelope(
        process_json=serialize_process_json(process_json),
        change_description=change_description,
    )
