"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Default header normalization for the caller's transport.

The transport's default headers are shared by every call made through it,
so the user-agent token is appended only when it is not already present.
"""

from __future__ import annotations

import httpx

from restcall._version import __version__

USER_AGENT = f"restcall/{__version__}"


def user_agent_tokens(client: httpx.AsyncClient) -> list[str]:
    """Product tokens currently carried by the client's User-Agent header."""
    return " ".join(client.headers.get_list("User-Agent")).split()


def ensure_user_agent(client: httpx.AsyncClient) -> None:
    """Add ``USER_AGENT`` to the client's default User-Agent, at most once."""
    tokens = user_agent_tokens(client)
    if USER_AGENT in tokens:
        return
    client.headers["User-Agent"] = " ".join(tokens + [USER_AGENT])


def set_accept(client: httpx.AsyncClient, content_type: str) -> None:
    # last writer wins when calls share a client
    client.headers["Accept"] = content_type
