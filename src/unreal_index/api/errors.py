"""Map index errors onto HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from unreal_index.api.schemas import ErrorResponse
from unreal_index.core.errors import (
    ClassNotFoundError,
    InvalidPathError,
    InvalidQueryError,
    NoSearchPathConfiguredError,
    NotInitializedError,
    SubsystemDirectoryNotFoundError,
    UnknownConceptError,
    UnknownSubsystemError,
    UnrealIndexError,
)

_STATUS_BY_ERROR: tuple[tuple[type[UnrealIndexError], int], ...] = (
    (ClassNotFoundError, status.HTTP_404_NOT_FOUND),
    (UnknownSubsystemError, status.HTTP_404_NOT_FOUND),
    (UnknownConceptError, status.HTTP_404_NOT_FOUND),
    (SubsystemDirectoryNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidPathError, status.HTTP_400_BAD_REQUEST),
    (InvalidQueryError, status.HTTP_400_BAD_REQUEST),
    (NotInitializedError, status.HTTP_409_CONFLICT),
    (NoSearchPathConfiguredError, status.HTTP_409_CONFLICT),
)


def status_for(exc: UnrealIndexError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _handle_index_error(_request: Request, exc: UnrealIndexError) -> JSONResponse:
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=status_for(exc), content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnrealIndexError, _handle_index_error)  # type: ignore[arg-type]
