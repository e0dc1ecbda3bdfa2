from __future__ import annotations

from pydantic import BaseModel


class SocraticReplyRequest(BaseModel):
    text: str | None = None


class StudyReplyRequest(BaseModel):
    text: str | None = None
    context: str | None = None


class TutorReplyResponse(BaseModel):
    reply: str
