from __future__ import annotations

from fastapi import FastAPI

from unreal_index.api.errors import register_error_handlers
from unreal_index.api.routes.classes import router as classes_router
from unreal_index.api.routes.health import router as health_router
from unreal_index.api.routes.reference import router as reference_router
from unreal_index.api.routes.root import router as root_router
from unreal_index.api.routes.search import router as search_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Unreal Index API",
        description="Query classes, hierarchies, references and API entries of Unreal C++ source trees.",
        version="0.1.0",
    )

    register_error_handlers(app)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(classes_router)
    app.include_router(search_router)
    app.include_router(reference_router)

    return app
