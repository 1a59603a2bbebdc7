from fastapi import FastAPI

from .tools import router as tools_router

def register_routes(app: FastAPI):
    app.include_router(tools_router, prefix="/v1")
