from fastapi import APIRouter, Depends, Response, status

from unreal_index.api.dependencies import get_index
from unreal_index.api.schemas import HealthResponse, ReadinessResponse
from unreal_index.core.index import ClassIndex

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    index: ClassIndex = Depends(get_index),
) -> ReadinessResponse:
    """Readiness probe: is at least one source root configured?"""
    if index.is_configured:
        return ReadinessResponse(status="ok", index="configured")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", index="unconfigured")
