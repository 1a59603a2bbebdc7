import json
from typing import Any

from fastapi import APIRouter, Body, Depends

from coolify_mcp.api.schemas import ToolCallResponse
from coolify_mcp.core.container import Container, get_container


router = APIRouter(prefix="/tools", tags=["Tools"])

@router.get("", summary="List all Coolify tools")
async def list_tools(container: Container = Depends(get_container)):
    return [
        tool.model_dump(by_alias=True)
        for tool in container.dispatcher.list_tools()
    ]

@router.post("/{name}", summary="Invoke a Coolify tool", response_model=ToolCallResponse)
async def call_tool(
    name: str,
    arguments: dict[str, Any] | None = Body(default=None),
    container: Container = Depends(get_container),
) -> ToolCallResponse:
    outcome = await container.dispatcher.call_tool(name, arguments or {})
    return ToolCallResponse(
        name=name,
        is_error=outcome.is_error,
        result=json.loads(outcome.text),
    )
