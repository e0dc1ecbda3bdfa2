from __future__ import annotations

from pydantic import BaseModel, Field

from thinknote.core.constants import FLASHCARD_COUNT_DEFAULT, FLASHCARD_COUNT_MAX


class Flashcard(BaseModel):
    q: str
    a: str


class FlashcardRequest(BaseModel):
    text: str | None = None
    source_title: str | None = None
    count: int = Field(default=FLASHCARD_COUNT_DEFAULT, ge=1, le=FLASHCARD_COUNT_MAX)


class FlashcardResponse(BaseModel):
    items: list[Flashcard]
    source_title: str | None = None
