# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Shared test helpers faking an OctoPrint server with ``httpx.MockTransport``."""

from __future__ import annotations

from collections.abc import Callable
import json
from typing import Any

import httpx


HOST = "http://octoprint.test"
API_KEY = "test-key"

Handler = Callable[[httpx.Request], httpx.Response]


def mock_factory(handler: Handler) -> Callable[..., httpx.Client]:
    """Build an ``http_client_factory`` answering every request with ``handler``."""

    def factory(**kwargs: Any) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler), **kwargs)

    return factory


class Recorder:
    """Records requests and replies with queued responses, 204 once they run out."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, payload: Any = None, **kwargs: Any) -> None:
        if payload is not None:
            kwargs["json"] = payload
        self.responses.append(httpx.Response(status_code, **kwargs))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(204)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)
