"""Transport abstraction.

The dispatcher only depends on this interface, so tests and alternative
backends can swap the HTTP implementation out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from coolify_mcp.schemas import ApiResult, HttpMethod


class Transport(ABC):
    """Sends one request to the backend and normalizes the outcome."""

    @abstractmethod
    async def send(self, path: str, method: HttpMethod = HttpMethod.GET, body: Any | None = None) -> ApiResult:
        """Perform a single call. Must never raise for HTTP or network failures."""
        raise NotImplementedError
