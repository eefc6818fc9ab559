# -*- coding: utf-8 -*-
"""
Process Manager API error types.
"""

from typing import Optional


class PromappError(Exception):
    pass


class PromappApiError(PromappError):
    """Non-2xx response (or unusable body) from a Process Manager endpoint"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, action: str, response) -> "PromappApiError":
        reason = getattr(response, "reason", "") or ""
        message = f"Failed to {action}: {response.status_code} {reason}".rstrip()
        body = response.text or ""
        if body:
            message += f"\n{body}"
        return cls(message, status_code=response.status_code, body=body)


class TokenNotFoundError(PromappError):
    pass
