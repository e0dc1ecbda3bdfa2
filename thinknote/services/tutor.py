from __future__ import annotations

from thinknote.core.constants import (
    SOCRATIC_TEMPERATURE,
    STUDY_CONTEXT_CHARS,
    STUDY_TEMPERATURE,
    SYSTEM_SOCRATIC,
    SYSTEM_STUDY,
)
from thinknote.services.chat import ChatCompletionError, ChatMessage, complete_chat, take_first_chars


class TutorReplyError(ChatCompletionError):
    pass


def build_study_system_prompt(context: str | None) -> str:
    clipped = take_first_chars(context, STUDY_CONTEXT_CHARS)
    if not clipped.strip():
        return SYSTEM_STUDY
    return f'{SYSTEM_STUDY}\n\nPrimary context:\n"""{clipped}"""\n'


async def _reply(messages: list[ChatMessage], temperature: float, api_key: str, model: str, base_url: str | None) -> str:
    reply = await complete_chat(messages, api_key=api_key, model=model, temperature=temperature, base_url=base_url)
    if not reply:
        raise TutorReplyError("Empty tutor reply.")
    return reply


async def socratic_reply(text: str, api_key: str, model: str, base_url: str | None = None) -> str:
    messages = [
        {"role": "system", "content": SYSTEM_SOCRATIC},
        {"role": "user", "content": text},
    ]
    return await _reply(messages, SOCRATIC_TEMPERATURE, api_key, model, base_url)


async def study_reply(
    text: str,
    context: str | None,
    api_key: str,
    model: str,
    base_url: str | None = None,
) -> str:
    """Answer as the study coach, grounded in the student's transcript or summary when given."""
    messages = [
        {"role": "system", "content": build_study_system_prompt(context)},
        {"role": "user", "content": text},
    ]
    return await _reply(messages, STUDY_TEMPERATURE, api_key, model, base_url)
