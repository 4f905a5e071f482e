#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Restcall, a product of Garudex Labs

Demo of the Restcall client.

Runs typed GET, POST, PUT and DELETE calls against an in-memory API served
through ``httpx.MockTransport`` and prints the request/response log blocks.
"""

import asyncio
import json

import httpx
from pydantic import BaseModel

from restcall import HttpStatusError, RestClient
from restcall.logging_config import get_logger, setup_logging


class Item(BaseModel):
    id: int = 0
    name: str = ""


def fake_api(request: httpx.Request) -> httpx.Response:
    if request.method == "GET" and request.url.path == "/items/1":
        return httpx.Response(200, json={"id": 1, "name": "widget"})
    if request.method == "GET" and request.url.path == "/items/broken":
        return httpx.Response(200, text="not-json")
    if request.method == "POST" and request.url.path == "/items":
        return httpx.Response(201, json={**json.loads(request.content), "id": 2})
    if request.method == "PUT" and request.url.path == "/items/2":
        return httpx.Response(200, content=request.content)
    if request.method == "DELETE" and request.url.path == "/items/2":
        return httpx.Response(204)
    return httpx.Response(404, text="not found")


async def main():
    """Run Restcall demo."""
    setup_logging(level="DEBUG", json_format=False)
    logger = get_logger("demo")

    async with httpx.AsyncClient(
        base_url="https://api.example.com",
        transport=httpx.MockTransport(fake_api),
    ) as transport:
        client = RestClient(transport, logger=print)

        print("1. Typed GET:")
        item = await client.get_json("/items/1", Item)
        logger.info("item_fetched", item=item.model_dump())

        print("2. Typed GET with a malformed body falls back to Item():")
        fallback = await client.get_json("/items/broken", Item)
        logger.info("item_fallback", item=fallback.model_dump())

        print("3. POST and PUT:")
        created = await client.post_json("/items", Item(name="gadget"))
        updated = await client.put_json("/items/2", Item(id=created.id, name="gizmo"))
        logger.info("item_saved", item=updated.model_dump())

        print("4. DELETE:")
        await client.delete("/items/2")
        try:
            await client.delete("/items/3")
        except HttpStatusError as e:
            logger.warning("delete_failed", status_code=e.status_code, body=e.body)


if __name__ == "__main__":
    asyncio.run(main())
