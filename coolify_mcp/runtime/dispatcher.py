"""
Tool dispatcher: tool call -> route -> one backend request -> JSON text.

Failure handling is layered:
- backend and network failures come back from the transport as ApiResult
  payloads with ``success: false`` and are returned as normal output
- an unknown tool name is answered locally with ``{"error": ...}``
- anything that breaks while building the request or serializing the
  result is caught by ``call_tool`` and flagged with ``is_error``
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from coolify_mcp.core.errors import UnknownToolError
from coolify_mcp.observability.tracing import Span, log_event, new_trace_id
from coolify_mcp.schemas import RequestSpec, ToolCall, ToolCallOutcome, ToolDefinition
from coolify_mcp.tools.base import Transport
from coolify_mcp.tools.registry import TOOL_REGISTRY, TOOLS_BY_NAME, RegisteredTool


def _error_text(message: str) -> str:
    return json.dumps({'error': message}, separators=(',', ':'), ensure_ascii=False)


class ToolDispatcher:
    """Routes tool calls to the Coolify API through a Transport."""

    def __init__(
            self,
            transport: Transport,
            registry: tuple[RegisteredTool, ...] = TOOL_REGISTRY,
    ) -> None:
        self._transport = transport
        self._registry = registry
        if registry is TOOL_REGISTRY:
            self._by_name = TOOLS_BY_NAME
        else:
            self._by_name = {tool.name: tool for tool in registry}

    def list_tools(self) -> tuple[ToolDefinition, ...]:
        """Return every advertised tool, in registry order."""
        return tuple(tool.definition for tool in self._registry)

    def build_request(self, name: str, arguments: Mapping[str, Any] | None = None) -> RequestSpec:
        """Derive the backend request for a tool call without sending it.

        Raises:
            UnknownToolError: If ``name`` is not registered.
            ToolArgumentError: If a path argument is missing.
        """
        tool = self._by_name.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool.route.build(arguments or {})

    async def invoke(self, name: str, arguments: Mapping[str, Any] | None = None) -> str:
        """Run one tool call and return the result as JSON text.

        Args:
            name: Registered tool name.
            arguments: Tool arguments as received from the client.

        Returns:
            Pretty-printed ApiResult JSON, or ``{"error": "Unknown tool: ..."}``.

        Backend and network failures never raise; they come back as
        ``success: false`` payloads. Dispatch failures do raise, and
        ``call_tool`` is the boundary that never raises.

        Raises:
            ToolDispatchError: If the request cannot be built from the arguments.
        """
        try:
            spec = self.build_request(name, arguments)
        except UnknownToolError as exc:
            log_event('tool.unknown', trace_id=new_trace_id(), tool=name)
            return _error_text(str(exc))

        result = await self._transport.send(spec.path, spec.method, spec.body)
        return json.dumps(result.to_payload(), indent=2, ensure_ascii=False)

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolCallOutcome:
        """Outermost call boundary. Never raises.

        Returns:
            The tool output, with ``is_error`` set only for dispatcher-level failures.
        """
        call = ToolCall(name=name, arguments=dict(arguments or {}))
        trace_id = new_trace_id()
        span = Span(name='tool.call', trace_id=trace_id, attributes={'tool': call.name})
        log_event('tool.call.start', trace_id=trace_id, tool=call.name, argument_keys=sorted(call.arguments))

        try:
            text = await self.invoke(call.name, call.arguments)
        except Exception as exc:  # noqa: BLE001 - boundary wrapper for dispatch failures
            span.end()
            log_event('tool.error', trace_id=trace_id, span=span, tool=call.name, error=str(exc))
            return ToolCallOutcome(text=_error_text(str(exc) or 'Unknown error'), is_error=True)

        span.end()
        log_event('tool.call.end', trace_id=trace_id, span=span, tool=call.name)
        return ToolCallOutcome(text=text)
