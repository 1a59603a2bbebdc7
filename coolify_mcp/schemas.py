"""Schemas for tool definitions, tool calls, backend requests, and results.

Pydantic is used for the request-scoped envelopes:
- ToolDefinition is the advertised capability (name, description, input schema).
- ToolCall is the incoming invocation envelope.
- RequestSpec is the single HTTP request derived from a ToolCall.
- ApiResult is the uniform outcome returned by the transport.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP methods used by the Coolify API."""

    GET = 'GET'
    POST = 'POST'
    PATCH = 'PATCH'
    DELETE = 'DELETE'


class ToolDefinition(BaseModel):
    """A named, schema-described tool advertised to the calling agent.

    Examples:
        >>> ToolDefinition(name="coolify_health", description="Health", inputSchema={"type": "object"}).name
        'coolify_health'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    input_schema: dict[str, Any] = Field(alias='inputSchema')


class ToolCall(BaseModel):
    """A tool call envelope as received from the protocol client.

    Args:
        name: Tool name to execute.
        arguments: JSON object of tool arguments.
    """

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class RequestSpec(BaseModel):
    """The path/method/body triple for one backend call."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: HttpMethod = HttpMethod.GET
    body: Any | None = None


class ApiResult(BaseModel):
    """Uniform success/failure envelope produced by the transport.

    Only the fields that were explicitly set are serialized, so a network
    failure carries no ``status`` and a failed response carries no ``data``.
    """

    success: bool
    data: Any | None = None
    error: str | None = None
    status: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode='json', exclude_unset=True)


class ToolCallOutcome(BaseModel):
    """Text payload and error flag handed back to the protocol surface."""

    text: str
    is_error: bool = False
