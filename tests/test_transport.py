from __future__ import annotations

import json

import httpx
import pytest
from httpx import MockTransport

from coolify_mcp.schemas import HttpMethod
from coolify_mcp.tools.http_tool import CoolifyApiConfig, HttpTransport

from tests.fixtures.coolify_backend_stub import CoolifyBackendStub

CONFIG = CoolifyApiConfig(base_url='http://coolify.test', api_token='test-token')


async def _send(stub: CoolifyBackendStub, path: str, method: HttpMethod = HttpMethod.GET, body=None,
                config: CoolifyApiConfig = CONFIG):
    async with httpx.AsyncClient(transport=MockTransport(stub)) as client:
        transport = HttpTransport(config, client=client)
        return await transport.send(path, method, body)


@pytest.mark.anyio
async def test_send_returns_parsed_body_on_success() -> None:
    # Arrange
    stub = CoolifyBackendStub(200, {'id': 1})

    # Act
    result = await _send(stub, '/projects/abc')

    # Assert
    assert result.to_payload() == {'success': True, 'data': {'id': 1}, 'status': 200}
    assert str(stub.last.url) == 'http://coolify.test/api/v1/projects/abc'


@pytest.mark.anyio
async def test_send_attaches_bearer_and_json_headers() -> None:
    stub = CoolifyBackendStub(200, [])

    await _send(stub, '/version')

    headers = stub.last.headers
    assert headers['authorization'] == 'Bearer test-token'
    assert headers['content-type'] == 'application/json'
    assert headers['accept'] == 'application/json'


@pytest.mark.anyio
async def test_send_uses_backend_message_on_error_status() -> None:
    stub = CoolifyBackendStub(404, {'message': 'not found'})

    result = await _send(stub, '/applications/missing')

    assert result.to_payload() == {'success': False, 'error': 'not found', 'status': 404}


@pytest.mark.anyio
async def test_send_synthesizes_status_line_when_error_body_has_no_message() -> None:
    stub = CoolifyBackendStub(500, text='<html>boom</html>')

    result = await _send(stub, '/servers')

    assert result.success is False
    assert result.error == 'HTTP 500: Internal Server Error'
    assert result.status == 500


@pytest.mark.anyio
async def test_send_treats_non_json_success_body_as_null_data() -> None:
    stub = CoolifyBackendStub(204)

    result = await _send(stub, '/applications/abc/stop', HttpMethod.POST)

    assert result.to_payload() == {'success': True, 'data': None, 'status': 204}


@pytest.mark.anyio
async def test_send_reports_connection_failure_without_status() -> None:
    stub = CoolifyBackendStub(error=httpx.ConnectError('Connection refused'))

    result = await _send(stub, '/health')

    assert result.to_payload() == {'success': False, 'error': 'Connection refused'}
    assert result.status is None


@pytest.mark.anyio
async def test_send_falls_back_to_generic_message_for_silent_failures() -> None:
    stub = CoolifyBackendStub(error=httpx.ReadError(''))

    result = await _send(stub, '/health')

    assert result.error == 'Unknown error occurred'
    assert 'status' not in result.to_payload()


@pytest.mark.anyio
async def test_send_serializes_body_for_non_get_requests() -> None:
    stub = CoolifyBackendStub(201, {'uuid': 'new'})

    await _send(stub, '/projects', HttpMethod.POST, {'name': 'demo'})

    assert stub.last.method == 'POST'
    assert stub.last_body() == {'name': 'demo'}


@pytest.mark.anyio
async def test_send_never_sends_a_body_with_get() -> None:
    stub = CoolifyBackendStub(200, {})

    await _send(stub, '/projects', HttpMethod.GET, {'ignored': True})

    assert stub.last.content == b''


@pytest.mark.anyio
async def test_send_tolerates_trailing_slash_in_base_url() -> None:
    stub = CoolifyBackendStub(200, {})
    config = CoolifyApiConfig(base_url='http://coolify.test/', api_token='t')

    await _send(stub, '/teams', config=config)

    assert stub.last.url.path == '/api/v1/teams'


@pytest.mark.anyio
async def test_send_preserves_query_string_in_path() -> None:
    stub = CoolifyBackendStub(200, {})

    await _send(stub, '/deploy?uuid=x&force=true')

    assert stub.last.url.path == '/api/v1/deploy'
    assert dict(stub.last.url.params) == {'uuid': 'x', 'force': 'true'}


@pytest.mark.anyio
async def test_send_renders_null_backend_message_as_null() -> None:
    stub = CoolifyBackendStub(422, {'message': None})

    result = await _send(stub, '/applications/public', HttpMethod.POST, {})

    assert result.to_payload() == {'success': False, 'error': 'null', 'status': 422}


@pytest.mark.anyio
async def test_send_logs_status_on_request_span(capsys) -> None:
    # Arrange
    stub = CoolifyBackendStub(404, {'message': 'not found'})

    # Act
    await _send(stub, '/servers/abc')

    # Assert
    events = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    request_event = next(e for e in events if e['event'] == 'http.request')
    attributes = request_event['span']['attributes']
    assert attributes == {'method': 'GET', 'path': '/servers/abc', 'status': 404, 'success': False}
    assert request_event['span']['duration_ms'] is not None


@pytest.mark.anyio
async def test_send_logs_failure_message_on_request_span(capsys) -> None:
    stub = CoolifyBackendStub(error=httpx.ConnectError('Connection refused'))

    await _send(stub, '/health')

    events = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    error_event = next(e for e in events if e['event'] == 'http.error')
    assert error_event['span']['attributes']['error'] == 'Connection refused'
