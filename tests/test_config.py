from __future__ import annotations

from coolify_mcp.config import Settings
from coolify_mcp.core.container import Container
from coolify_mcp.tools.http_tool import CoolifyApiConfig


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv('COOLIFY_BASE_URL', raising=False)
    monkeypatch.delenv('COOLIFY_API_TOKEN', raising=False)

    settings = Settings(_env_file=None)

    assert settings.base_url == 'http://localhost:8000'
    assert settings.api_token == ''


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv('COOLIFY_BASE_URL', 'https://coolify.example.com')
    monkeypatch.setenv('COOLIFY_API_TOKEN', 'secret')

    config = CoolifyApiConfig.from_settings(Settings(_env_file=None))

    assert config.url_for('/health') == 'https://coolify.example.com/api/v1/health'
    assert config.headers['Authorization'] == 'Bearer secret'


def test_container_wires_dispatcher_from_settings() -> None:
    container = Container(Settings(_env_file=None, base_url='http://c.test', api_token='t'))

    assert container.settings.base_url == 'http://c.test'
    assert len(container.dispatcher.list_tools()) == 79
