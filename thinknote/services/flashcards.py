from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from thinknote.core.constants import (
    FLASHCARD_CONTEXT_CHARS,
    FLASHCARD_INSTRUCTIONS,
    FLASHCARD_PARSE_FALLBACK,
    FLASHCARD_SYSTEM_PROMPT,
    FLASHCARD_TEMPERATURE,
)
from thinknote.schemas.flashcards import Flashcard
from thinknote.services.chat import complete_chat, take_first_chars

logger = logging.getLogger(__name__)

_FLASHCARD_LIST = TypeAdapter(list[Flashcard])


def build_flashcard_prompt(text: str, count: int) -> str:
    return (
        f"Create approximately {count} flashcards from the following content.\n"
        f"{FLASHCARD_INSTRUCTIONS}\n\n"
        f'CONTENT:\n"""{take_first_chars(text, FLASHCARD_CONTEXT_CHARS)}"""'
    )


def parse_flashcards(raw: str) -> list[Flashcard]:
    """
    Pull the JSON array out of a model reply.

    Anything before the first ``[`` or after the last ``]`` is ignored. A reply
    with no array yields no cards; an array that does not parse yields a single
    placeholder card asking the student to regenerate.
    """
    first = raw.find("[")
    last = raw.rfind("]")
    payload = raw[first : last + 1] if first >= 0 and last > first else "[]"

    try:
        return _FLASHCARD_LIST.validate_python(json.loads(payload))
    except (json.JSONDecodeError, ValidationError):
        logger.warning("flashcard reply did not parse", extra={"reply_chars": len(raw)})
        return [Flashcard(**FLASHCARD_PARSE_FALLBACK)]


async def generate_flashcards(
    text: str,
    count: int,
    api_key: str,
    model: str,
    base_url: str | None = None,
) -> list[Flashcard]:
    raw = await complete_chat(
        [
            {"role": "system", "content": FLASHCARD_SYSTEM_PROMPT},
            {"role": "user", "content": build_flashcard_prompt(text, count)},
        ],
        api_key=api_key,
        model=model,
        temperature=FLASHCARD_TEMPERATURE,
        base_url=base_url,
    )
    return parse_flashcards(raw or "[]")
