"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

HTTP call layer: header normalization, logging sink, body formats and
call executors.
"""

from restcall.http.sink import (
    LogCallback,
    format_request_log,
    format_response_log,
    log_request,
    log_response,
    structlog_sink,
)
from restcall.http.executor import (
    PayloadMethod,
    delete,
    get_async,
    get_format,
    get_json,
    get_text,
    get_xml,
    get_xml_text,
    post_json,
    post_without_status_check,
    put_json,
    send_json_payload,
)
from restcall.http.client import RestClient
from restcall.http.formats import JSON, XML, FormatAdapter, JsonFormat, XmlFormat
from restcall.http.headers import USER_AGENT, ensure_user_agent, set_accept

__all__ = [
    "RestClient",
    "PayloadMethod",
    "delete",
    "get_async",
    "get_format",
    "get_json",
    "get_text",
    "get_xml",
    "get_xml_text",
    "post_json",
    "post_without_status_check",
    "put_json",
    "send_json_payload",
    "JSON",
    "XML",
    "FormatAdapter",
    "JsonFormat",
    "XmlFormat",
    "USER_AGENT",
    "ensure_user_agent",
    "set_accept",
    "LogCallback",
    "format_request_log",
    "format_response_log",
    "log_request",
    "log_response",
    "structlog_sink",
]
