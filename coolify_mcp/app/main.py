"""FastAPI tool surface.

Serves the same tool registry as the MCP server over plain HTTP, for clients
that cannot speak MCP:
- GET  /v1/tools          -> advertised tool definitions
- POST /v1/tools/{name}   -> invoke a tool with a JSON object of arguments

Run with: uvicorn coolify_mcp.app.main:app
"""

from __future__ import annotations

from fastapi import FastAPI

from coolify_mcp.api.routes import register_routes

tags_metadata = [
    {
        "name": "Tools",
        "description": "Coolify API operations exposed as callable tools"
    },
]

app = FastAPI(
    title='Coolify Tool Service',
    version='1.0.0',
    description='Coolify API tools over HTTP',
    openapi_tags=tags_metadata
)

# Register all API routes
register_routes(app)
