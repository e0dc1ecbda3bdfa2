from __future__ import annotations

import asyncio
import logging
import time

from thinknote.application.guards import validate_audio_upload, validate_transcript
from thinknote.core.config import Settings
from thinknote.core.errors import ExternalServiceError, InvalidRequestError
from thinknote.schemas.summaries import (
    SummarizeRequest,
    SummarizeResponse,
    SummaryPolicyResponse,
    TranscribeSummarizeResponse,
)
from thinknote.services.summarizer import generate_summary
from thinknote.services.transcriber import transcribe_audio
from thinknote.summary import SummaryPolicy, compute_policy, enforce_word_budget, word_count

logger = logging.getLogger(__name__)


def _policy_response(policy: SummaryPolicy) -> SummaryPolicyResponse:
    return SummaryPolicyResponse(
        target=policy.target,
        hard_cap=policy.hard_cap,
        must_be_shorter_than=policy.must_be_shorter_than,
    )


async def _summarize(transcript: str, settings: Settings) -> tuple[str, SummaryPolicy]:
    policy = compute_policy(transcript)

    step_start = time.perf_counter()
    draft = await generate_summary(
        transcript,
        policy,
        settings.openai_api_key,
        settings.summary_model,
        settings.openai_base_url,
    )
    logger.info("generate_summary %.2fms", (time.perf_counter() - step_start) * 1000)

    summary = enforce_word_budget(draft, transcript, policy)
    if word_count(summary) < word_count(draft):
        logger.info(
            "summary trimmed to budget",
            extra={"draft_words": word_count(draft), "summary_words": word_count(summary), "hard_cap": policy.hard_cap},
        )
    return summary, policy


async def summarize_transcript(request: SummarizeRequest, settings: Settings) -> SummarizeResponse:
    transcript = validate_transcript(request.transcript)
    summary, policy = await _summarize(transcript, settings)

    return SummarizeResponse(
        transcript_words=word_count(transcript),
        summary_words=word_count(summary),
        summary=summary,
        policy=_policy_response(policy),
    )


async def transcribe_and_summarize(
    audio: bytes,
    filename: str | None,
    content_type: str | None,
    summarize: bool,
    settings: Settings,
) -> TranscribeSummarizeResponse:
    validate_audio_upload(filename, content_type, len(audio), settings.max_audio_bytes)

    step_start = time.perf_counter()
    transcript = await asyncio.to_thread(
        transcribe_audio,
        audio,
        filename or "audio",
        settings.groq_api_key,
        settings.transcription_model,
    )
    logger.info(
        "transcribe_audio %.2fms bytes=%s",
        (time.perf_counter() - step_start) * 1000,
        len(audio),
    )

    response = TranscribeSummarizeResponse(transcript=transcript, transcript_words=word_count(transcript))
    if not summarize:
        return response

    try:
        summary, policy = await _summarize(validate_transcript(transcript), settings)
    except (ExternalServiceError, InvalidRequestError) as exc:
        # The transcript is still useful on its own.
        logger.warning("summary skipped", extra={"error_code": exc.code, "error_type": type(exc).__name__})
        return response

    response.summary = summary
    response.policy = _policy_response(policy)
    return response
