"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Restcall client facade.

Binds a caller-owned transport, an optional logging callback and a
configuration so the call operations can be used as methods::

    async with httpx.AsyncClient(base_url="https://api.example.com/") as http:
        client = RestClient(http, logger=print)
        item = await client.get_json("items/1", Item)
        await client.delete("items/1")
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Type, TypeVar

import httpx

from restcall.config.settings import RestCallConfig, get_default_config
from restcall.http import executor
from restcall.http.formats import XML, JsonFormat
from restcall.http.sink import LogCallback, structlog_sink
from restcall.logging_config import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class RestClient:
    """REST operations over one ``httpx.AsyncClient``.

    The transport is never created or closed here; its default headers are
    updated in place by every call.

    Args:
        transport: Client bound to the API's base URL.
        logger: Callback receiving request/response log blocks. When omitted
            and ``config.http.log_traffic`` is set, blocks go to structlog.
        config: Restcall configuration. Defaults to ``get_default_config()``.
    """

    def __init__(
        self,
        transport: httpx.AsyncClient,
        logger: Optional[LogCallback] = None,
        config: Optional[RestCallConfig] = None,
    ) -> None:
        self._transport = transport
        self._config = config or get_default_config()
        if logger is None and self._config.http.log_traffic:
            logger = structlog_sink()
        self._logger = logger
        self._json = JsonFormat(indent=self._config.http.json_indent)
        log.debug("RestClient initialized", base_url=str(transport.base_url))

    @property
    def transport(self) -> httpx.AsyncClient:
        return self._transport

    @property
    def config(self) -> RestCallConfig:
        return self._config

    async def get_json(self, path: str, type_: Type[T]) -> T:
        return await executor.get_format(
            self._transport, path, type_, self._json, self._logger
        )

    async def get_xml(self, path: str, type_: Type[T]) -> T:
        return await executor.get_format(
            self._transport, path, type_, XML, self._logger
        )

    async def get_xml_text(self, path: str) -> str:
        return await executor.get_text(self._transport, path, XML, self._logger)

    async def post_json(
        self,
        path: str,
        payload: Any,
        response_type: Optional[Type[T]] = None,
    ) -> T:
        return await executor.send_json_payload(
            self._transport,
            path,
            payload,
            executor.PayloadMethod.POST,
            self._logger,
            response_type,
            fmt=self._json,
        )

    async def put_json(
        self,
        path: str,
        payload: Any,
        response_type: Optional[Type[T]] = None,
    ) -> T:
        return await executor.send_json_payload(
            self._transport,
            path,
            payload,
            executor.PayloadMethod.PUT,
            self._logger,
            response_type,
            fmt=self._json,
        )

    async def delete(self, path: str) -> None:
        await executor.delete(self._transport, path, self._logger)

    def get_async(self, path: str) -> "asyncio.Task[httpx.Response]":
        return executor.get_async(self._transport, path, self._logger)

    def post_without_status_check(
        self, path: str, payload: Any
    ) -> "asyncio.Task[httpx.Response]":
        return executor.post_without_status_check(
            self._transport, path, payload, self._logger
        )
