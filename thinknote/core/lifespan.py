from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log provider configuration on startup so a missing key shows up before the first request."""
    settings = app.state.settings
    logger.info(
        "Starting ThinkNote API",
        extra={"app_env": settings.app_env, "summary_model": settings.summary_model},
    )
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; /summarize will fail until it is configured.")
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY is not set; audio transcription is unavailable.")

    try:
        yield
    finally:
        logger.info("Stopping ThinkNote API")
