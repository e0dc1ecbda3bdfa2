from __future__ import annotations

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    transcript: str | None = None


class SummaryPolicyResponse(BaseModel):
    target: int
    hard_cap: int
    must_be_shorter_than: int


class SummarizeResponse(BaseModel):
    transcript_words: int
    summary_words: int
    summary: str
    policy: SummaryPolicyResponse


class TranscribeSummarizeResponse(BaseModel):
    transcript: str
    transcript_words: int
    summary: str | None = None
    policy: SummaryPolicyResponse | None = None
