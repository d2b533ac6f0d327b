"""Uniform success/error envelope returned by every tool."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorObject(BaseModel):
    code: str
    message: str
    details: Any | None = None

    model_config = ConfigDict(extra="forbid")


class ToolResponse(BaseModel):
    success: bool
    data: Any | None = None
    error: ErrorObject | None = None

    model_config = ConfigDict(extra="forbid")


def make_success(data: Any) -> ToolResponse:
    return ToolResponse(success=True, data=data, error=None)


def make_error(code: str, message: str, details: Any | None = None) -> ToolResponse:
    return ToolResponse(
        success=False,
        data=None,
        error=ErrorObject(code=code, message=message, details=details),
    )
