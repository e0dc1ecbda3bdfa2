from typing import Annotated

from fastapi import APIRouter, Depends

from thinknote.application.tutor import create_flashcards, reply_socratic, reply_study
from thinknote.core.config import Settings, get_settings
from thinknote.schemas.errors import ErrorResponse
from thinknote.schemas.flashcards import FlashcardRequest, FlashcardResponse
from thinknote.schemas.tutor import SocraticReplyRequest, StudyReplyRequest, TutorReplyResponse

router = APIRouter(tags=["tutor"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Text is required."},
    502: {"model": ErrorResponse, "description": "Chat model failed."},
}


@router.post("/socratic/reply", response_model=TutorReplyResponse, responses=_ERROR_RESPONSES)
async def socratic(
    request: SocraticReplyRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> TutorReplyResponse:
    return await reply_socratic(request, settings)


@router.post("/study/reply", response_model=TutorReplyResponse, responses=_ERROR_RESPONSES)
async def study(
    request: StudyReplyRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> TutorReplyResponse:
    return await reply_study(request, settings)


@router.post("/flashcards/generate", response_model=FlashcardResponse, responses=_ERROR_RESPONSES)
async def flashcards(
    request: FlashcardRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> FlashcardResponse:
    return await create_flashcards(request, settings)
