"""Error types shared by the search tools."""

from __future__ import annotations

from typing import Any


class ClixMcpError(Exception):
    """Base error for everything raised by clixmcp."""


class ApiError(ClixMcpError):
    """Raised when a remote request fails in a way the caller cannot recover from."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ValidationError(ClixMcpError):
    """Raised when tool arguments are malformed."""


class ConfigurationError(ClixMcpError):
    """Raised when configuration values are unusable."""


class NotFoundError(ClixMcpError):
    """Raised when a named resource does not exist."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")


def format_error_for_user(error: BaseException | object) -> str:
    """Render an error as a message suitable for a tool response."""
    if isinstance(error, ApiError):
        message = f"[API Error]\n\n{error}"
        if error.status_code:
            message += f"\n\nStatus Code: {error.status_code}"
            if error.status_code in (401, 403):
                message += "\n\nTip: Check your credentials and permissions."
            elif error.status_code == 429:
                message += "\n\nTip: You may be rate limited. Retry later or reduce request frequency."
        return message
    if isinstance(error, ValidationError):
        return f"[Validation Error]\n\n{error}"
    if isinstance(error, ConfigurationError):
        return f"[Configuration Error]\n\n{error}"
    if isinstance(error, NotFoundError):
        return f"[Not Found]\n\n{error}"
    if isinstance(error, Exception):
        return f"[Error]\n\n{error}"
    return f"[Unknown Error]\n\n{error}"
