from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ToolCallResponse(BaseModel):
    name: str
    is_error: bool
    result: Any
