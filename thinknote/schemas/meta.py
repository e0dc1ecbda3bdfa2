from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str


class ReadyResponse(BaseModel):
    """Readiness plus which model providers this deployment can reach."""

    status: str
    summary_model: str
    chat_model: str
    transcription_enabled: bool


class StatusResponse(BaseModel):
    status: str
    app_env: str
    version: str | None = None
    uptime_seconds: float | None = None
