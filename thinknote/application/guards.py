from __future__ import annotations

import logging

from thinknote.core.constants import AUDIO_CONTENT_TYPE_PREFIXES, MIN_TRANSCRIPT_CHARS
from thinknote.core.errors import InvalidRequestError, RequestTooLargeError

logger = logging.getLogger(__name__)


def validate_transcript(transcript: str | None) -> str:
    if not isinstance(transcript, str) or len(transcript.strip()) < MIN_TRANSCRIPT_CHARS:
        logger.warning("rejected transcript", extra={"error_code": "invalid_request"})
        raise InvalidRequestError("Transcript too short or missing.")
    return transcript


def validate_audio_upload(filename: str | None, content_type: str | None, size: int, max_bytes: int) -> None:
    if not filename or size == 0:
        raise InvalidRequestError("No audio file provided.")
    if size > max_bytes:
        raise RequestTooLargeError("Audio file too large.")
    if content_type and not content_type.lower().startswith(AUDIO_CONTENT_TYPE_PREFIXES):
        logger.warning("rejected upload", extra={"content_type": content_type})
        raise InvalidRequestError("Unsupported audio content type.")


def validate_text(text: str | None) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidRequestError("Text is required.")
    return text
