"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Tests for the request/response logging sink.
"""

from unittest.mock import MagicMock

import httpx

from restcall.http.sink import (
    format_request_log,
    format_response_log,
    log_request,
    log_response,
    structlog_sink,
)


class TestFormatting:
    def test_request_block(self):
        text = format_request_log(
            "GET",
            "https://api.example.com/items",
            httpx.Headers({"Accept": "application/json"}),
            "",
        )
        assert "HTTP REQUEST" in text
        assert "HTTP Method:\nGET\n" in text
        assert "Absolute Uri:\nhttps://api.example.com/items\n" in text
        assert "accept" in text and "application/json" in text
        assert text.endswith("Body:\n\n")

    def test_response_block(self):
        text = format_response_log("201 Created", {"Location": "/items/2"}, '{\n  "id": 2\n}')
        assert "HTTP RESPONSE" in text
        assert "Status Code:\n201 Created\n" in text
        assert "Location" in text
        assert '"id": 2' in text

    def test_repeated_headers_each_listed(self):
        headers = httpx.Headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
        text = format_response_log("200 OK", headers, "")
        assert "a=1" in text and "b=2" in text


class TestCallbacks:
    def test_no_callback_is_noop(self):
        log_request("GET", "https://x/", {}, "", None)
        log_response("200 OK", {}, "", None)

    def test_each_call_emits_one_block(self):
        lines = []
        log_request("DELETE", "https://x/items/1", {}, "", lines.append)
        log_response("204 No Content", {}, "", lines.append)
        assert len(lines) == 2
        assert lines[0].startswith("=")
        assert "DELETE" in lines[0]
        assert "204 No Content" in lines[1]


class TestStructlogSink:
    def test_forwards_block_to_logger(self):
        target = MagicMock()
        sink = structlog_sink(target)
        sink("block")
        target.debug.assert_called_once_with("http_traffic", message="block")

    def test_custom_level(self):
        target = MagicMock()
        structlog_sink(target, level="info")("block")
        target.info.assert_called_once_with("http_traffic", message="block")
