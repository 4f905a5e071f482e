"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Restcall - Format-agnostic REST invocation layer over httpx

Restcall performs GET/POST/PUT/DELETE calls against a base-addressed API
with JSON and XML body formats, user-agent injection, request/response
logging and a fallback policy for malformed GET bodies.
"""

from restcall._version import __version__
from restcall.exceptions import (
    HttpStatusError,
    MalformedBodyError,
    RestCallError,
    UnsupportedMethodError,
)
from restcall.http import (
    JSON,
    XML,
    PayloadMethod,
    RestClient,
    delete,
    get_async,
    get_json,
    get_xml,
    get_xml_text,
    post_json,
    post_without_status_check,
    put_json,
)

__all__ = [
    "__version__",
    "HttpStatusError",
    "MalformedBodyError",
    "RestCallError",
    "UnsupportedMethodError",
    "JSON",
    "XML",
    "PayloadMethod",
    "RestClient",
    "delete",
    "get_async",
    "get_json",
    "get_xml",
    "get_xml_text",
    "post_json",
    "post_without_status_check",
    "put_json",
]
