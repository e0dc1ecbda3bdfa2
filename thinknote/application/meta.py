from __future__ import annotations

import logging
import time

from thinknote import __version__
from thinknote.core.config import Settings
from thinknote.core.errors import NotReadyError
from thinknote.schemas.meta import HealthResponse, ReadyResponse, StatusResponse

_START_TIME = time.monotonic()

logger = logging.getLogger(__name__)


async def health_status() -> HealthResponse:
    return HealthResponse(status="ok")


async def readiness_status(settings: Settings) -> ReadyResponse:
    # Summaries need the chat model; transcription is optional.
    if not settings.openai_api_key:
        logger.warning("readiness check failed: summary model not configured")
        raise NotReadyError("Summary model is not configured.")

    transcription_enabled = bool(settings.groq_api_key)
    logger.info("readiness check ok", extra={"transcription_enabled": transcription_enabled})
    return ReadyResponse(
        status="ok",
        summary_model=settings.summary_model,
        chat_model=settings.chat_model,
        transcription_enabled=transcription_enabled,
    )


async def status_snapshot(settings: Settings) -> StatusResponse:
    uptime_seconds = time.monotonic() - _START_TIME
    logger.info("status snapshot", extra={"uptime_seconds": round(uptime_seconds, 2), "version": __version__})
    return StatusResponse(
        status="ok",
        app_env=settings.app_env,
        version=__version__,
        uptime_seconds=uptime_seconds,
    )
