from __future__ import annotations

import httpx

from transports.client import HttpClient


class MockTransport(httpx.BaseTransport):
    """Lets a real ``httpx.Client`` be driven by anything with ``do(request)``."""

    def __init__(self, client: HttpClient):
        self.client = client

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        response = self.client.do(request)
        if not isinstance(response, httpx.Response):
            raise TypeError(
                f"configured response for {request.method} is {type(response).__name__}, "
                "httpx transports need httpx.Response"
            )
        return response
