"""HTTP transport that calls the Coolify REST API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx

from coolify_mcp.config import Settings
from coolify_mcp.observability.tracing import Span, end_http_span, new_trace_id
from coolify_mcp.schemas import ApiResult, HttpMethod
from coolify_mcp.tools.base import Transport

API_PREFIX = '/api/v1'
REQUEST_TIMEOUT = 120.0
UNKNOWN_ERROR = 'Unknown error occurred'


@dataclass(frozen=True)
class CoolifyApiConfig:
    """Connection details for one Coolify instance."""

    base_url: str
    api_token: str = ''
    api_prefix: str = API_PREFIX

    @staticmethod
    def from_settings(settings: Settings) -> 'CoolifyApiConfig':
        return CoolifyApiConfig(base_url=settings.base_url, api_token=settings.api_token)

    def url_for(self, path: str) -> str:
        return f'{self.base_url.rstrip("/")}{self.api_prefix}{path}'

    @property
    def headers(self) -> dict[str, str]:
        return {
            'Authorization': f'Bearer {self.api_token}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }


class HttpTransport(Transport):
    """Execute backend requests over HTTP.

    Every outcome is folded into an ApiResult:
    - 2xx: success with the parsed JSON body (None when the body is not JSON)
    - non-2xx: failure with the backend ``message`` or the status line
    - network failure: failure with the exception message and no status
    """

    def __init__(self, config: CoolifyApiConfig, client: httpx.AsyncClient | None = None) -> None:
        """Create an HTTP transport.

        Args:
            config: Base URL and bearer token of the Coolify instance.
            client: Optional injected httpx client for testing / connection pooling.
        """
        self._cfg = config
        self._client = client

    async def send(self, path: str, method: HttpMethod = HttpMethod.GET, body: Any | None = None) -> ApiResult:
        method = HttpMethod(method)
        url = self._cfg.url_for(path)

        content: str | None = None
        if body is not None and method != HttpMethod.GET:
            content = json.dumps(body)

        span = Span(
            name='http.request',
            trace_id=new_trace_id(),
            attributes={'method': method.value, 'path': path},
        )
        try:
            if self._client is not None:
                resp = await self._request(self._client, method, url, content)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await self._request(client, method, url, content)
        except Exception as exc:  # noqa: BLE001 - transport failures are returned, never raised
            message = str(exc) or UNKNOWN_ERROR
            end_http_span(span, error=message)
            return ApiResult(success=False, error=message)

        end_http_span(span, status=resp.status_code)
        return _to_result(resp)

    async def _request(
            self,
            client: httpx.AsyncClient,
            method: HttpMethod,
            url: str,
            content: str | None,
    ) -> httpx.Response:
        return await client.request(
            method.value,
            url,
            content=content,
            headers=self._cfg.headers,
            timeout=REQUEST_TIMEOUT,
        )


def _to_result(resp: httpx.Response) -> ApiResult:
    try:
        data = resp.json()
    except ValueError:
        # Empty and non-JSON bodies (e.g. 204 responses) are reported as null.
        data = None

    if not resp.is_success:
        if isinstance(data, dict) and 'message' in data:
            error = _message_text(data['message'])
        else:
            error = f'HTTP {resp.status_code}: {resp.reason_phrase}'
        return ApiResult(success=False, error=error, status=resp.status_code)

    return ApiResult(success=True, data=data, status=resp.status_code)


def _message_text(message: Any) -> str:
    if message is None:
        return 'null'
    return str(message)
