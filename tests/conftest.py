"""
Pytest configuration for fetchtick.

Provides fixtures for:
- Settings cache isolation between tests
- A sample todo body
- Fake HTTP clients backed by httpx.MockTransport (no network access)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generator

import httpx
import pytest

from fetchtick.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached settings so env overrides in one test do not leak.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def todo_body() -> Dict[str, Any]:
    return {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False}


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], Any]], httpx.AsyncClient]:
    """
    Build an AsyncClient whose requests are answered by ``handler``.

    The handler may be sync or async and may raise httpx exceptions to
    simulate transport failures.
    """

    def _factory(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory
