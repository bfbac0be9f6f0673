from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint listing the available routes."""
    return {
        "meta": {
            "title": "Unreal Index API",
            "description": "Query classes, hierarchies, references and API entries of Unreal C++ source trees.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "roots": "/roots",
            "classes": "/classes/{name}",
            "hierarchy": "/classes/{name}/hierarchy",
            "references": "/references/{identifier}",
            "search": "/search",
            "patterns": "/patterns",
            "practices": "/practices/{concept}",
            "subsystems": "/subsystems/{name}",
            "api-reference": "/api-reference",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
