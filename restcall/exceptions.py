"""
Exception hierarchy for Restcall.

All custom exceptions inherit from RestCallError base class.
"""

from typing import Optional


class RestCallError(Exception):
    """Base exception for all Restcall errors."""
    pass


# HTTP Errors
class HttpError(RestCallError):
    """Base exception for HTTP call errors."""
    pass


class HttpStatusError(HttpError):
    """
    Raised when a response status code is outside the 2xx success range.

    The response body is attached exactly as it was received, without any
    formatting or parsing.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        target = f" for {method} {url}" if method and url else ""
        super().__init__(f"HTTP {status_code}{target}")


class UnsupportedMethodError(HttpError):
    """Raised when a payload call is made with a verb other than POST or PUT."""
    pass


# Format Errors
class FormatError(RestCallError):
    """Base exception for body formatting errors."""
    pass


class MalformedBodyError(FormatError):
    """Raised when a body cannot be parsed into the expected type."""

    def __init__(self, message: str, content_type: str = "", body: str = "") -> None:
        super().__init__(message)
        self.content_type = content_type
        self.body = body


# Configuration Errors
class ConfigurationError(RestCallError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
