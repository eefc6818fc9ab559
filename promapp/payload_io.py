# -*- coding: utf-8 -*-
"""
Payload file helpers

Load saved GET responses, pull out processJson, apply edits, and write
encapsulated PUT bodies to disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union

from promapp.envelope import UpdateEnvelope

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_get_response(path: PathLike) -> Dict[str, Any]:
    """Read a saved GET /Api/v1/Processes/{id} response"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


def extract_process_json(get_response: Dict[str, Any]) -> Dict[str, Any]:
    process_json = get_response.get("processJson")
    if not isinstance(process_json, dict):
        raise ValueError("GET response has no processJson object")
    return process_json


def apply_changes(process_json: Dict[str, Any], changes: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of process_json with top-level keys overwritten by changes"""
    updated = dict(process_json)
    updated.update(changes)
    return updated


def parse_assignment(text: str) -> Tuple[str, Any]:
    """
    Parse a KEY=VALUE pair from the command line.

    The value is decoded as JSON when possible, otherwise kept as a string.

    Examples:
        >>> parse_assignment("StateId=1")
        ('StateId', 1)
        >>> parse_assignment("Name=Updated Process Name")
        ('Name', 'Updated Process Name')
    """
    key, sep, raw = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"expected KEY=VALUE, got {text!r}")
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    return key, value


def parse_assignments(items: Iterable[str]) -> Dict[str, Any]:
    return dict(parse_assignment(item) for item in items)


def write_envelope(envelope: UpdateEnvelope, path: PathLike, indent: int = 2) -> Path:
    """Write the envelope as pretty-printed JSON and return the path"""
    out = Path(path)
    out.write_text(
        json.dumps(envelope.to_dict(), ensure_ascii=False, indent=indent),
        encoding="utf-8",
    )
    logger.info(f"Envelope written to {out}")
    return out


def default_output_path(input_path: PathLike) -> Path:
    """user-payload.json -> user-payload-encapsulated.json"""
    src = Path(input_path)
    return src.with_name(f"{src.stem}-encapsulated.json")
