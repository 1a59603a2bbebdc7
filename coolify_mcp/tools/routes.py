"""Route descriptors: how a tool's arguments become one backend request.

Each tool maps to an immutable ``Route``. Arguments are partitioned as:
- path fields, named by ``{field}`` placeholders in the template
- query fields, appended only when the argument is truthy
- body fields, depending on ``body``:
    NONE      -> no body
    REMAINDER -> every argument not consumed by the path, forwarded verbatim
    ENVELOPE  -> a single argument wrapped under a fixed key
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import Formatter
from typing import Any, Mapping
from urllib.parse import urlencode

from coolify_mcp.core.errors import ToolArgumentError
from coolify_mcp.schemas import HttpMethod, RequestSpec


class BodyRule(str, Enum):
    NONE = 'none'
    REMAINDER = 'remainder'
    ENVELOPE = 'envelope'


@dataclass(frozen=True)
class QueryParam:
    """An optional query-string parameter.

    Args:
        arg: Argument name read from the tool call.
        key: Query key sent to the backend (defaults to ``arg``).
        flag: Render as ``true`` instead of the argument value.
    """

    arg: str
    key: str | None = None
    flag: bool = False

    @property
    def query_key(self) -> str:
        return self.key or self.arg


@dataclass(frozen=True)
class Route:
    method: HttpMethod
    path: str
    body: BodyRule = BodyRule.NONE
    query: tuple[QueryParam, ...] = ()
    # (argument name, body key) pairs; renamed keys lead the body
    renames: tuple[tuple[str, str], ...] = ()
    # (body key, argument name) for BodyRule.ENVELOPE
    envelope: tuple[str, str] | None = None

    @property
    def path_fields(self) -> tuple[str, ...]:
        return tuple(field for _, field, _, _ in Formatter().parse(self.path) if field)

    def build(self, arguments: Mapping[str, Any]) -> RequestSpec:
        """Derive the RequestSpec for one invocation.

        Raises:
            ToolArgumentError: If a path placeholder has no matching argument.
        """
        path_values: dict[str, str] = {}
        for field in self.path_fields:
            value = arguments.get(field)
            if value is None:
                raise ToolArgumentError(f'Missing required argument: {field}')
            path_values[field] = _format_value(value)

        path = self.path.format_map(path_values) + _query_string(self.query, arguments)
        return RequestSpec(path=path, method=self.method, body=self._body(arguments))

    def _body(self, arguments: Mapping[str, Any]) -> Any | None:
        if self.body == BodyRule.ENVELOPE and self.envelope is not None:
            key, arg = self.envelope
            return {key: arguments[arg]} if arg in arguments else {}

        if self.body != BodyRule.REMAINDER:
            return None

        consumed = set(self.path_fields) | {q.arg for q in self.query}
        body: dict[str, Any] = {}
        for arg, key in self.renames:
            if arg in arguments:
                body[key] = arguments[arg]
        renamed = {arg for arg, _ in self.renames}
        for name, value in arguments.items():
            if name in consumed or name in renamed:
                continue
            body.setdefault(name, value)
        return body


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _query_string(params: tuple[QueryParam, ...], arguments: Mapping[str, Any]) -> str:
    pairs: list[tuple[str, str]] = []
    for param in params:
        value = arguments.get(param.arg)
        if not value:
            continue
        pairs.append((param.query_key, 'true' if param.flag else _format_value(value)))
    if not pairs:
        return ''
    return f'?{urlencode(pairs)}'


# ------------------------------------------------------------------------------
# Route constructors
# ------------------------------------------------------------------------------

DELETE_FLAGS = (
    QueryParam('delete_configurations', flag=True),
    QueryParam('delete_volumes', flag=True),
)


def get(path: str, *query: QueryParam) -> Route:
    return Route(HttpMethod.GET, path, query=query)


def action(path: str, *query: QueryParam) -> Route:
    """POST without a body, e.g. start/stop/restart."""
    return Route(HttpMethod.POST, path, query=query)


def create(path: str) -> Route:
    return Route(HttpMethod.POST, path, body=BodyRule.REMAINDER)


def update(path: str, renames: tuple[tuple[str, str], ...] = ()) -> Route:
    return Route(HttpMethod.PATCH, path, body=BodyRule.REMAINDER, renames=renames)


def delete(path: str, *query: QueryParam) -> Route:
    return Route(HttpMethod.DELETE, path, query=query)
