from __future__ import annotations

from typing import Any

from openai import APIError, AsyncOpenAI

from thinknote.core.constants import SUMMARY_TEMPERATURE
from thinknote.core.errors import ExternalServiceError
from thinknote.summary import SummaryPolicy, build_summary_system_prompt, build_summary_user_prompt


class SummarizationError(ExternalServiceError):
    pass


async def generate_summary(
    transcript: str,
    policy: SummaryPolicy,
    api_key: str,
    model: str,
    base_url: str | None = None,
) -> str:
    """Ask the chat model for a draft summary; the caller enforces the word budget."""
    if not api_key:
        raise SummarizationError("Missing OPENAI_API_KEY.")

    client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": build_summary_system_prompt(policy)},
                {"role": "user", "content": build_summary_user_prompt(transcript)},
            ],
            temperature=SUMMARY_TEMPERATURE,
        )
    except APIError as exc:
        raise SummarizationError("Failed to call the summary model.") from exc

    content: Any = response.choices[0].message.content if response.choices else None
    if not isinstance(content, str) or not content.strip():
        raise SummarizationError("Empty summary response.")

    return content.strip()
