from __future__ import annotations

from typing import Any

from groq import APIError, Groq

from thinknote.core.errors import ExternalServiceError


class TranscriptionError(ExternalServiceError):
    pass


def _extract_text(response: Any) -> str:
    text = getattr(response, "text", None)
    if not isinstance(text, str):
        raise TranscriptionError("Transcription response missing text.")
    if not text.strip():
        raise TranscriptionError("Empty transcript.")
    return text.strip()


def transcribe_audio(audio: bytes, filename: str, api_key: str, model: str) -> str:
    if not api_key:
        raise TranscriptionError("Missing GROQ_API_KEY.")

    client = Groq(api_key=api_key)
    try:
        response = client.audio.transcriptions.create(
            file=(filename, audio),
            model=model,
            response_format="json",
            language="en",
            temperature=0.0,
        )
    except APIError as exc:
        raise TranscriptionError("Failed to call the transcription provider.") from exc
    return _extract_text(response)
