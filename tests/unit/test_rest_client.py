"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Tests for the RestClient facade.
"""

from unittest.mock import patch

import httpx
import pytest
from pydantic import BaseModel

from restcall.config.settings import HttpConfig, RestCallConfig
from restcall.exceptions import HttpStatusError
from restcall.http.client import RestClient


class Item(BaseModel):
    id: int = 0
    name: str = ""


def routes(request: httpx.Request) -> httpx.Response:
    key = (request.method, request.url.path)
    if key == ("GET", "/items/1"):
        return httpx.Response(200, json={"id": 1, "name": "a"})
    if key == ("GET", "/items/1.xml"):
        return httpx.Response(200, text="<Item><id>1</id><name>a</name></Item>")
    if key == ("POST", "/items"):
        return httpx.Response(201, json={"id": 2, "name": "b"})
    if key == ("PUT", "/items/2"):
        return httpx.Response(200, json={"id": 2, "name": "c"})
    if key == ("DELETE", "/items/2"):
        return httpx.Response(204)
    return httpx.Response(404, text="not found")


class TestRestClient:
    def test_exposes_transport_and_default_config(self, make_client):
        transport = make_client(routes)
        client = RestClient(transport)
        assert client.transport is transport
        assert client.config.http.json_indent == 2

    @pytest.mark.asyncio
    async def test_operations(self, make_client, log_lines):
        client = RestClient(make_client(routes), logger=log_lines.append)

        assert await client.get_json("/items/1", Item) == Item(id=1, name="a")
        assert await client.get_xml("/items/1.xml", Item) == Item(id=1, name="a")
        assert "<name>a</name>" in await client.get_xml_text("/items/1.xml")
        assert await client.post_json("/items", Item(name="b")) == Item(id=2, name="b")
        assert await client.put_json("/items/2", Item(id=2, name="c")) == Item(id=2, name="c")
        assert await client.delete("/items/2") is None
        assert len(log_lines) == 12

    @pytest.mark.asyncio
    async def test_unknown_route_raises(self, make_client):
        client = RestClient(make_client(routes))
        with pytest.raises(HttpStatusError) as exc_info:
            await client.delete("/items/99")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_fire_and_forget(self, make_client):
        client = RestClient(make_client(routes))
        response = await client.get_async("/missing")
        assert response.status_code == 404
        response = await client.post_without_status_check("/items", {"name": "b"})
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_json_indent_from_config(self, make_client, log_lines):
        config = RestCallConfig(http=HttpConfig(json_indent=4))
        client = RestClient(make_client(routes), logger=log_lines.append, config=config)
        await client.get_json("/items/1", Item)
        assert '{\n    "id": 1' in log_lines[1]

    @pytest.mark.asyncio
    async def test_log_traffic_routes_to_structlog(self, make_client):
        config = RestCallConfig(http=HttpConfig(log_traffic=True))
        with patch("restcall.http.client.structlog_sink") as sink_factory:
            client = RestClient(make_client(routes), config=config)
            await client.get_json("/items/1", Item)

        sink = sink_factory.return_value
        assert sink.call_count == 2

    @pytest.mark.asyncio
    async def test_explicit_logger_wins_over_log_traffic(self, make_client, log_lines):
        config = RestCallConfig(http=HttpConfig(log_traffic=True))
        with patch("restcall.http.client.structlog_sink") as sink_factory:
            client = RestClient(make_client(routes), logger=log_lines.append, config=config)
            await client.get_json("/items/1", Item)

        sink_factory.assert_not_called()
        assert len(log_lines) == 2
