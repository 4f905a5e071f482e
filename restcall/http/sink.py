"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Request/response logging sink.

Every outbound request and inbound response is rendered into one
human-readable block and handed to a caller-supplied callback. Without a
callback nothing is formatted.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

import structlog

from restcall.logging_config import get_logger

LogCallback = Callable[[str], None]
HeadersLike = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

_REQUEST_BANNER = "============================ HTTP REQUEST ============================"
_RESPONSE_BANNER = "============================ HTTP RESPONSE ============================"


def _header_items(headers: Optional[HeadersLike]) -> list[Tuple[str, str]]:
    if headers is None:
        return []
    if hasattr(headers, "multi_items"):
        return list(headers.multi_items())
    if isinstance(headers, Mapping):
        return list(headers.items())
    return list(headers)


def _format_headers(headers: Optional[HeadersLike]) -> str:
    return "\n".join(f"{name:<30}: {value}" for name, value in _header_items(headers))


def format_request_log(
    method: str,
    uri: str,
    headers: Optional[HeadersLike],
    body: str,
) -> str:
    """Render an outbound request as a log block."""
    return (
        f"{_REQUEST_BANNER}\n\n"
        f"HTTP Method:\n{method}\n\n"
        f"Absolute Uri:\n{uri}\n\n"
        f"Headers:\n{_format_headers(headers)}\n\n"
        f"Body:\n{body}\n"
    )


def format_response_log(
    status: str,
    headers: Optional[HeadersLike],
    body: str,
) -> str:
    """Render an inbound response as a log block."""
    return (
        f"{_RESPONSE_BANNER}\n\n"
        f"Status Code:\n{status}\n\n"
        f"Headers:\n{_format_headers(headers)}\n\n"
        f"Body:\n{body}\n"
    )


def log_request(
    method: str,
    uri: str,
    headers: Optional[HeadersLike],
    body: str,
    logger: Optional[LogCallback],
) -> None:
    if logger is not None:
        logger(format_request_log(method, uri, headers, body))


def log_response(
    status: str,
    headers: Optional[HeadersLike],
    body: str,
    logger: Optional[LogCallback],
) -> None:
    if logger is not None:
        logger(format_response_log(status, headers, body))


def structlog_sink(
    logger: Optional[Any] = None,
    level: str = "debug",
) -> LogCallback:
    """
    Build a logging callback that forwards each block to structlog.

    Args:
        logger: structlog logger to write to. Defaults to this module's logger.
        level: Name of the log method to call ("debug", "info", ...).

    Returns:
        Callback suitable for the ``logger`` argument of every call operation.
    """
    target: structlog.stdlib.BoundLogger = logger or get_logger(__name__)
    emit = getattr(target, level)

    def _sink(message: str) -> None:
        emit("http_traffic", message=message)

    return _sink
