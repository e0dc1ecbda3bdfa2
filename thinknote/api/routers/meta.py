from typing import Annotated

from fastapi import APIRouter, Depends

from thinknote.application.meta import health_status, readiness_status, status_snapshot
from thinknote.core.config import Settings, get_settings
from thinknote.schemas.errors import ErrorResponse
from thinknote.schemas.meta import HealthResponse, ReadyResponse, StatusResponse

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return await health_status()


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ErrorResponse, "description": "Summary model not configured."}},
)
async def ready(settings: Annotated[Settings, Depends(get_settings)]) -> ReadyResponse:
    return await readiness_status(settings)


@router.get("/status", response_model=StatusResponse)
async def status(settings: Annotated[Settings, Depends(get_settings)]) -> StatusResponse:
    return await status_snapshot(settings)
