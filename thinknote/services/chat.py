from __future__ import annotations

from typing import Any

from openai import APIError, AsyncOpenAI

from thinknote.core.errors import ExternalServiceError

ChatMessage = dict[str, str]


class ChatCompletionError(ExternalServiceError):
    pass


def take_first_chars(text: str | None, max_chars: int) -> str:
    """Clip text used as model context to at most ``max_chars`` characters."""
    if not text:
        return ""
    return text[:max_chars] if len(text) > max_chars else text


async def complete_chat(
    messages: list[ChatMessage],
    *,
    api_key: str,
    model: str,
    temperature: float,
    base_url: str | None = None,
) -> str:
    """Run one chat completion and return the stripped reply ("" when the model sent nothing)."""
    if not api_key:
        raise ChatCompletionError("Missing OPENAI_API_KEY.")

    client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
        )
    except APIError as exc:
        raise ChatCompletionError("Failed to call the chat model.") from exc

    content: Any = response.choices[0].message.content if response.choices else None
    return content.strip() if isinstance(content, str) else ""
