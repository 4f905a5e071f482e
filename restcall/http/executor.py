"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Call executors for REST operations over a caller-owned ``httpx.AsyncClient``.

Every operation normalizes the client's default headers, logs the outbound
request, sends it and, for awaited calls, validates the status code before
the body is logged and parsed:

- ``get_json`` / ``get_xml``: typed GET, falls back to ``type_()`` when the
  body cannot be parsed
- ``get_xml_text``: GET returning the raw body
- ``post_json`` / ``put_json``: JSON payload, parse errors propagate
- ``delete``: no return value
- ``get_async`` / ``post_without_status_check``: return the in-flight task
  without awaiting it or checking the status
"""

from __future__ import annotations

import asyncio
import time
import types
import typing
from enum import Enum
from typing import Any, Optional, Type, TypeVar, Union

import httpx

from restcall.exceptions import HttpStatusError, MalformedBodyError, UnsupportedMethodError
from restcall.http.formats import JSON, XML, FormatAdapter
from restcall.http.headers import ensure_user_agent, set_accept
from restcall.http.sink import LogCallback, log_request, log_response
from restcall.logging_config import get_logger, log_http_exchange

log = get_logger(__name__)

T = TypeVar("T")

_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))


class PayloadMethod(str, Enum):
    """Verbs accepted by ``send_json_payload``."""

    POST = "POST"
    PUT = "PUT"

    @classmethod
    def coerce(cls, method: Union["PayloadMethod", str]) -> "PayloadMethod":
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise UnsupportedMethodError(
                f"Unsupported payload method '{method}', expected POST or PUT"
            ) from None


def _default(type_: Type[T]) -> T:
    origin = typing.get_origin(type_)
    if origin in _UNION_ORIGINS:
        if type(None) in typing.get_args(type_):
            return None
        raise TypeError(f"Cannot build a default for {type_!r}")
    # List[int] and friends are built through their origin
    return (origin or type_)()


def _status_text(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


def _build_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    body: Optional[str] = None,
    content_type: Optional[str] = None,
) -> httpx.Request:
    headers = {"Content-Type": content_type} if content_type else None
    return client.build_request(method, path, content=body, headers=headers)


async def _send(client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
    """Send one request, read its body and reject non-2xx statuses."""
    start = time.monotonic()
    response = await client.send(request)
    elapsed = (time.monotonic() - start) * 1000

    log_http_exchange(
        log,
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        duration_ms=round(elapsed, 2),
    )

    if not response.is_success:
        raise HttpStatusError(
            response.status_code,
            response.text,
            method=request.method,
            url=str(request.url),
        )
    return response


async def get_text(
    client: httpx.AsyncClient,
    path: str,
    fmt: FormatAdapter,
    logger: Optional[LogCallback] = None,
) -> str:
    """
    GET ``path`` with ``fmt``'s content type and return the raw body.

    The response log shows the body pretty-printed by ``fmt``.

    Raises:
        HttpStatusError: If the response status is not 2xx.
    """
    ensure_user_agent(client)
    set_accept(client, fmt.content_type)

    request = _build_request(client, "GET", path)
    log_request(request.method, str(request.url), request.headers, "", logger)

    response = await _send(client, request)
    content = response.text
    log_response(_status_text(response), response.headers, fmt.pretty(content), logger)
    return content


async def get_format(
    client: httpx.AsyncClient,
    path: str,
    type_: Type[T],
    fmt: FormatAdapter,
    logger: Optional[LogCallback] = None,
) -> T:
    """
    GET ``path`` and parse the body into ``type_`` with ``fmt``.

    A body that cannot be parsed yields ``type_()`` instead of an error.

    Raises:
        HttpStatusError: If the response status is not 2xx.
    """
    content = await get_text(client, path, fmt, logger)
    try:
        return fmt.parse(content, type_)
    except MalformedBodyError as e:
        log.debug(
            "response_parse_fallback",
            path=path,
            content_type=fmt.content_type,
            error=str(e),
        )
        return _default(type_)


async def get_json(
    client: httpx.AsyncClient,
    path: str,
    type_: Type[T],
    logger: Optional[LogCallback] = None,
) -> T:
    """GET a JSON document as ``type_``, or ``type_()`` if it cannot be parsed."""
    return await get_format(client, path, type_, JSON, logger)


async def get_xml(
    client: httpx.AsyncClient,
    path: str,
    type_: Type[T],
    logger: Optional[LogCallback] = None,
) -> T:
    """GET an XML document as ``type_``, or ``type_()`` if it cannot be parsed."""
    return await get_format(client, path, type_, XML, logger)


async def get_xml_text(
    client: httpx.AsyncClient,
    path: str,
    logger: Optional[LogCallback] = None,
) -> str:
    """GET an XML document and return it unparsed."""
    return await get_text(client, path, XML, logger)


async def send_json_payload(
    client: httpx.AsyncClient,
    path: str,
    payload: Any,
    method: Union[PayloadMethod, str],
    logger: Optional[LogCallback] = None,
    response_type: Optional[Type[T]] = None,
    fmt: FormatAdapter = JSON,
) -> T:
    """
    POST or PUT ``payload`` as JSON and parse the response.

    Args:
        client: Transport the call is made through.
        path: Path relative to the client's base URL.
        payload: Value serialized as the request body.
        method: ``PayloadMethod.POST`` or ``PayloadMethod.PUT``.
        logger: Optional callback receiving request/response log blocks.
        response_type: Type of the response body. Defaults to ``type(payload)``.
        fmt: JSON adapter used for the payload and the response.

    Returns:
        The response body parsed into ``response_type``.

    Raises:
        UnsupportedMethodError: If ``method`` is not POST or PUT.
        HttpStatusError: If the response status is not 2xx.
        MalformedBodyError: If the response body cannot be parsed.
    """
    verb = PayloadMethod.coerce(method)
    result_type = response_type if response_type is not None else type(payload)

    ensure_user_agent(client)
    set_accept(client, fmt.content_type)

    request = _build_request(
        client,
        verb.value,
        path,
        body=fmt.serialize(payload),
        content_type=fmt.content_type,
    )
    log_request(
        request.method,
        str(request.url),
        request.headers,
        fmt.serialize(payload, indent=fmt.indent),
        logger,
    )

    response = await _send(client, request)
    content = response.text
    log_response(_status_text(response), response.headers, fmt.pretty(content), logger)

    return fmt.parse(content, result_type)


async def post_json(
    client: httpx.AsyncClient,
    path: str,
    payload: Any,
    logger: Optional[LogCallback] = None,
    response_type: Optional[Type[T]] = None,
) -> T:
    """POST ``payload`` as JSON; see ``send_json_payload``."""
    return await send_json_payload(
        client, path, payload, PayloadMethod.POST, logger, response_type
    )


async def put_json(
    client: httpx.AsyncClient,
    path: str,
    payload: Any,
    logger: Optional[LogCallback] = None,
    response_type: Optional[Type[T]] = None,
) -> T:
    """PUT ``payload`` as JSON; see ``send_json_payload``."""
    return await send_json_payload(
        client, path, payload, PayloadMethod.PUT, logger, response_type
    )


async def delete(
    client: httpx.AsyncClient,
    path: str,
    logger: Optional[LogCallback] = None,
) -> None:
    """
    DELETE ``path``. The response body is logged as received.

    Raises:
        HttpStatusError: If the response status is not 2xx.
    """
    ensure_user_agent(client)

    request = _build_request(client, "DELETE", path)
    log_request(request.method, str(request.url), request.headers, "", logger)

    response = await _send(client, request)
    log_response(_status_text(response), response.headers, response.text, logger)


def get_async(
    client: httpx.AsyncClient,
    path: str,
    logger: Optional[LogCallback] = None,
) -> "asyncio.Task[httpx.Response]":
    """
    Start a GET and return the pending task without awaiting it.

    The status code is not checked. Must be called from a running event loop.
    """
    ensure_user_agent(client)

    request = _build_request(client, "GET", path)
    log_request(request.method, str(request.url), request.headers, "", logger)
    return asyncio.ensure_future(client.send(request))


def post_without_status_check(
    client: httpx.AsyncClient,
    path: str,
    payload: Any,
    logger: Optional[LogCallback] = None,
) -> "asyncio.Task[httpx.Response]":
    """
    Start a JSON POST and return the pending task without awaiting it.

    The status code is not checked. Must be called from a running event loop.
    """
    ensure_user_agent(client)

    request = _build_request(
        client,
        "POST",
        path,
        body=JSON.serialize(payload),
        content_type=JSON.content_type,
    )
    log_request(
        request.method,
        str(request.url),
        request.headers,
        JSON.serialize(payload, indent=JSON.indent),
        logger,
    )
    return asyncio.ensure_future(client.send(request))