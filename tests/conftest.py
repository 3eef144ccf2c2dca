from __future__ import annotations

import httpx
import pytest


@pytest.fixture
def resp1() -> httpx.Response:
    return httpx.Response(200, text="body")


@pytest.fixture
def resp2() -> httpx.Response:
    return httpx.Response(404, text="body")


@pytest.fixture
def resp3() -> httpx.Response:
    return httpx.Response(503, text="body")
