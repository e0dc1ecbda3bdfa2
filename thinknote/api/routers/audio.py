from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from thinknote.application.summaries import transcribe_and_summarize
from thinknote.core.config import Settings, get_settings
from thinknote.schemas.errors import ErrorResponse
from thinknote.schemas.summaries import TranscribeSummarizeResponse

router = APIRouter(prefix="/audio", tags=["audio"])


@router.post(
    "/transcribe-summarize",
    response_model=TranscribeSummarizeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unsupported audio file."},
        413: {"model": ErrorResponse, "description": "Audio file too large."},
        502: {"model": ErrorResponse, "description": "Transcription provider failed."},
    },
)
async def transcribe_summarize(
    audio: Annotated[UploadFile, File()],
    settings: Annotated[Settings, Depends(get_settings)],
    summarize: Annotated[bool, Form()] = False,
) -> TranscribeSummarizeResponse:
    data = await audio.read()
    return await transcribe_and_summarize(data, audio.filename, audio.content_type, summarize, settings)
