# -*- coding: utf-8 -*-
"""
Envelope Error Types

Defines the argument errors raised while building an update envelope.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class EnvelopeErrorCode(Enum):
    """Envelope builder error codes"""

    INVALID_PROCESS_JSON = "invalid_process_json"                  # not a mapping
    INVALID_CHANGE_DESCRIPTION = "invalid_change_description"      # not a str
    UNSERIALIZABLE_PROCESS_JSON = "unserializable_process_json"    # JSON cannot encode it


ERROR_MESSAGES = {
    EnvelopeErrorCode.INVALID_PROCESS_JSON: "processJson must be a valid object (got {type_name})",
    EnvelopeErrorCode.INVALID_CHANGE_DESCRIPTION: "changeDescription must be a string (got {type_name})",
    EnvelopeErrorCode.UNSERIALIZABLE_PROCESS_JSON: "processJson could not be serialized to JSON: {reason}",
}


@dataclass
class InvalidArgument(ValueError):
    """Raised when the envelope builder receives an unusable argument"""

    code: EnvelopeErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: EnvelopeErrorCode, **kwargs) -> "InvalidArgument":
        """Create an error from its code, filling the message template"""
        template = ERROR_MESSAGES.get(code, "invalid argument")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)
