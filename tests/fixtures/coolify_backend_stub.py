# ------------------------------------------------------------------------------
# Stub transport for Coolify API calls
# ------------------------------------------------------------------------------
from __future__ import annotations

import json
from typing import Any

from httpx import Request, Response


class CoolifyBackendStub:
    """
    Stubbed HTTP handler for httpx.MockTransport.

    Records every request it receives and answers each one with the same
    canned response, or raises ``error`` to simulate a network failure.
    """

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        *,
        text: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.error = error
        self.requests: list[Request] = []

    def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return Response(self.status_code, text=self.text)
        if self.payload is None:
            return Response(self.status_code)
        return Response(self.status_code, json=self.payload)

    @property
    def last(self) -> Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_body(self) -> Any:
        content = self.last.content
        return json.loads(content.decode("utf-8")) if content else None
