# -*- coding: utf-8 -*-
"""
Envelope Module

Turns a processJson object from the read endpoint into the request body of the
update endpoint. Pure: no I/O, no mutation of the input.

Usage:
    from promapp.envelope import build_update_envelope
    envelope = build_update_envelope(process_json, "Updated objective")
    requests.put(url, json=envelope.to_dict(), headers=headers)
"""

from promapp.envelope.errors import EnvelopeErrorCode, InvalidArgument
from promapp.envelope.types import SharedActivityCollectionEditModel, UpdateEnvelope
from promapp.envelope.build_envelope import build_update_envelope, serialize_process_json


__all__ = [
    "build_update_envelope",
    "serialize_process_json",
    "UpdateEnvelope",
    "SharedActivityCollectionEditModel",
    "InvalidArgument",
    "EnvelopeErrorCode",
]
