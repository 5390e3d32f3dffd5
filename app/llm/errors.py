"""
Errors raised by LLM providers.
"""
from typing import Any, Optional


class LLMError(Exception):
    """Base class for provider failures."""


class UpstreamError(LLMError):
    """The remote model API failed, timed out, or returned a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body

    @classmethod
    def from_status(cls, status_code: int, reason: str, body: str) -> "UpstreamError":
        return cls(
            f"Gemini API error: {status_code} {reason} - {body}",
            status_code=status_code,
            reason=reason,
            body=body,
        )


class ResponseFormatError(LLMError):
    """The remote model replied successfully but not in the expected shape."""

    def __init__(self, message: str, raw: Any = None):
        super().__init__(message)
        self.raw = raw
