from __future__ import annotations

import httpx
import pytest
from httpx import ASGITransport

from coolify_mcp.app.main import app
from coolify_mcp.core.container import get_container
from coolify_mcp.runtime.dispatcher import ToolDispatcher

from tests.fixtures.recording_transport import RecordingTransport


class _StubContainer:
    def __init__(self, transport: RecordingTransport) -> None:
        self.dispatcher = ToolDispatcher(transport)


@pytest.fixture
def recording_transport():
    transport = RecordingTransport()
    app.dependency_overrides[get_container] = lambda: _StubContainer(transport)
    yield transport
    app.dependency_overrides.clear()


@pytest.mark.anyio
async def test_list_tools_endpoint(recording_transport) -> None:
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as client:
        resp = await client.get('/v1/tools')

    assert resp.status_code == 200
    tools = resp.json()
    assert len(tools) == 79
    assert tools[0]['name'] == 'coolify_health'
    assert 'inputSchema' in tools[0]


@pytest.mark.anyio
async def test_call_tool_endpoint_routes_to_backend(recording_transport) -> None:
    # Arrange
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as client:
        # Act
        resp = await client.post('/v1/tools/coolify_delete_application', json={'uuid': 'x', 'delete_volumes': True})

    # Assert
    assert resp.status_code == 200
    assert resp.json() == {
        'name': 'coolify_delete_application',
        'is_error': False,
        'result': {'success': True, 'data': {'ok': True}, 'status': 200},
    }
    assert recording_transport.sent[0].path == '/applications/x?delete_volumes=true'


@pytest.mark.anyio
async def test_call_tool_endpoint_flags_dispatch_errors(recording_transport) -> None:
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as client:
        resp = await client.post('/v1/tools/coolify_start_service')

    body = resp.json()
    assert body['is_error'] is True
    assert body['result'] == {'error': 'Missing required argument: uuid'}
    assert recording_transport.sent == []
