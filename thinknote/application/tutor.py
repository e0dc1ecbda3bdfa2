from __future__ import annotations

import logging
import time

from thinknote.application.guards import validate_text
from thinknote.core.config import Settings
from thinknote.schemas.flashcards import FlashcardRequest, FlashcardResponse
from thinknote.schemas.tutor import SocraticReplyRequest, StudyReplyRequest, TutorReplyResponse
from thinknote.services.flashcards import generate_flashcards
from thinknote.services.tutor import socratic_reply, study_reply

logger = logging.getLogger(__name__)


async def reply_socratic(request: SocraticReplyRequest, settings: Settings) -> TutorReplyResponse:
    text = validate_text(request.text)
    reply = await socratic_reply(text, settings.openai_api_key, settings.chat_model, settings.openai_base_url)
    return TutorReplyResponse(reply=reply)


async def reply_study(request: StudyReplyRequest, settings: Settings) -> TutorReplyResponse:
    text = validate_text(request.text)
    reply = await study_reply(
        text,
        request.context,
        settings.openai_api_key,
        settings.chat_model,
        settings.openai_base_url,
    )
    return TutorReplyResponse(reply=reply)


async def create_flashcards(request: FlashcardRequest, settings: Settings) -> FlashcardResponse:
    text = validate_text(request.text)

    step_start = time.perf_counter()
    items = await generate_flashcards(
        text,
        request.count,
        settings.openai_api_key,
        settings.chat_model,
        settings.openai_base_url,
    )
    logger.info(
        "generate_flashcards %.2fms",
        (time.perf_counter() - step_start) * 1000,
        extra={"requested": request.count, "generated": len(items)},
    )
    return FlashcardResponse(items=items, source_title=request.source_title or None)
