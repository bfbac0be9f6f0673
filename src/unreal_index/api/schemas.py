from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    index: str = "configured"


class RootsRequest(BaseModel):
    custom_path: str | None = None
    engine_path: str | None = None


class RootsResponse(BaseModel):
    custom_root: str | None = None
    engine_root: str | None = None


class PatternsRequest(BaseModel):
    content: str
    file_path: str = "<inline>"


class ErrorResponse(BaseModel):
    error: str
    detail: str
