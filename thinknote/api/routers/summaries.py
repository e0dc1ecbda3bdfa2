from typing import Annotated

from fastapi import APIRouter, Depends

from thinknote.application.summaries import summarize_transcript
from thinknote.core.config import Settings, get_settings
from thinknote.schemas.errors import ErrorResponse
from thinknote.schemas.summaries import SummarizeRequest, SummarizeResponse

router = APIRouter(tags=["summaries"])


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Transcript too short or missing."},
        500: {"model": ErrorResponse, "description": "Unexpected server error."},
        502: {"model": ErrorResponse, "description": "Summary model failed."},
    },
)
async def summarize(
    request: SummarizeRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SummarizeResponse:
    return await summarize_transcript(request, settings)
