"""
Pytest configuration and shared fixtures for Restcall tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Callable, Generator, List

import httpx
import pytest


BASE_URL = "https://api.example.com"


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def log_lines() -> List[str]:
    """Collects every block handed to a logging callback."""
    return []


@pytest.fixture
def recorded() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(recorded: List[httpx.Request]):
    """
    Factory fixture building an ``httpx.AsyncClient`` over a mock transport.

    Usage:
        async def test_something(make_client):
            client = make_client(lambda request: httpx.Response(200, json={}))
    """
    def _make_client(handler: Handler, base_url: str = BASE_URL) -> httpx.AsyncClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return handler(request)

        return httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(_record))

    return _make_client


# Hypothesis settings for property-based tests
from hypothesis import settings, Verbosity

settings.register_profile("restcall", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("restcall-ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("restcall-dev", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "restcall"))
