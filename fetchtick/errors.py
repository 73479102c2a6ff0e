"""
Error taxonomy for fetchtick.

Every error is logged once where it is detected and then raised to the caller
unchanged. Library code never retries and never exits the process; the CLI
maps these to exit codes.
"""

from __future__ import annotations

from typing import Any, List, Optional


class FetchTickError(Exception):
    """Base class for all fetchtick errors."""


class FetchError(FetchTickError):
    """Base class for failures of a single fetch."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """The request never produced a response (DNS, refused connection, timeout)."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Transport error for {url}: {cause!r}", url)
        self.cause = cause


class HttpStatusError(FetchError):
    """The response status was outside 200-299."""

    def __init__(self, url: str, status_code: int, reason: str) -> None:
        super().__init__(f"HTTP error! status: {status_code} {reason}".rstrip(), url)
        self.status_code = status_code
        self.reason = reason


class ParseError(FetchError):
    """The response body was not valid JSON."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Response from {url} is not valid JSON: {cause}", url)
        self.cause = cause


class ValidationError(FetchError):
    """The JSON body did not match the requested model."""

    def __init__(self, url: str, model_name: str, errors: Optional[List[Any]] = None) -> None:
        count = len(errors or [])
        super().__init__(
            f"Response from {url} does not match {model_name} ({count} error(s))", url
        )
        self.model_name = model_name
        self.errors = list(errors or [])


class ConfigError(FetchTickError, ValueError):
    """Invalid timer configuration (interval or duration)."""


class TimerStateError(FetchTickError, RuntimeError):
    """Illegal tick source lifecycle transition."""


__all__ = [
    "FetchTickError",
    "FetchError",
    "TransportError",
    "HttpStatusError",
    "ParseError",
    "ValidationError",
    "ConfigError",
    "TimerStateError",
]
