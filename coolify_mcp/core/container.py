# --------------------------------
# DI container
# --------------------------------
from functools import lru_cache

from coolify_mcp.config import Settings
from coolify_mcp.runtime.dispatcher import ToolDispatcher
from coolify_mcp.tools.http_tool import CoolifyApiConfig, HttpTransport


class Container:
    def __init__(self, settings: Settings | None = None):
        self._settings = settings or Settings()
        self._transport = HttpTransport(CoolifyApiConfig.from_settings(self._settings))
        self._dispatcher = ToolDispatcher(self._transport)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def dispatcher(self) -> ToolDispatcher:
        return self._dispatcher


@lru_cache
def get_container() -> Container:
    return Container()
