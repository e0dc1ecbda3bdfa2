from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Attributes every LogRecord carries; anything else on a record is "extra" context.
_STANDARD_LOG_RECORD_ATTRS = set(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {
    "message",
    "asctime",
    "taskName",
    "level_color",
    "name_color",
    "reset",
    "color_message",
}

# Context is propagated correctly across async tasks and awaits.
_LOG_CONTEXT: ContextVar[dict[str, Any] | None] = ContextVar("log_context", default=None)

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER_PREFIX = "thinknote"

# Provider SDKs and the server are noisy at DEBUG; keep them at WARNING unless overridden.
_DEFAULT_THIRD_PARTY_LEVELS: dict[str, str] = {
    "uvicorn": "WARNING",
    "uvicorn.error": "INFO",
    "uvicorn.access": "WARNING",
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "openai": "WARNING",
    "groq": "WARNING",
}

_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_COLOR_FORMAT = (
    "%(level_color)s%(asctime)s | %(levelname)s%(reset)s | "
    "%(name_color)s%(name)s%(reset)s | %(filename)s:%(lineno)d | "
    "%(level_color)s%(message)s%(reset)s"
)


class ContextInjectionFilter(logging.Filter):
    """Injects contextvars-based fields into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_LOG_CONTEXT.get() or {}).items():
            if key not in _STANDARD_LOG_RECORD_ATTRS:
                setattr(record, key, value)
        return True


class SmartContextFormatter(logging.Formatter):
    """Formatter that appends all extra fields as key=value context."""

    def format(self, record: logging.LogRecord) -> str:
        base_message = super().format(record)
        extra_fields = {key: value for key, value in record.__dict__.items() if key not in _STANDARD_LOG_RECORD_ATTRS}
        if not extra_fields:
            return base_message

        context_str = " ".join(f"{key}={value}" for key, value in extra_fields.items())
        return f"{base_message} [{context_str}]"


class ColorFormatter(SmartContextFormatter):
    """Colorize timestamp+level+message by level, logger name in blue."""

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",  # cyan
        "INFO": "\x1b[32m",  # green
        "WARNING": "\x1b[33m",  # yellow
        "ERROR": "\x1b[31m",  # red
        "CRITICAL": "\x1b[1;31m",  # bold red
    }
    _NAME_COLOR = "\x1b[34m"

    def format(self, record: logging.LogRecord) -> str:
        record.level_color = self._LEVEL_COLORS.get(record.levelname, "")  # type: ignore[attr-defined]
        record.name_color = self._NAME_COLOR  # type: ignore[attr-defined]
        record.reset = self._RESET  # type: ignore[attr-defined]
        return super().format(record)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily attach context fields to all log lines in this scope."""

    current = _LOG_CONTEXT.get() or {}
    token = _LOG_CONTEXT.set({**current, **kwargs})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def get_log_context() -> Mapping[str, Any]:
    """Return the current logging context (useful for debugging/tests)."""

    return _LOG_CONTEXT.get() or {}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _level_from_name(level_name: str, fallback: int) -> int:
    level = logging.getLevelName(level_name.upper().strip())
    return level if isinstance(level, int) else fallback


def _resolve_third_party_levels(root_level: int, overrides: Mapping[str, str] | None) -> dict[str, int]:
    merged = {**_DEFAULT_THIRD_PARTY_LEVELS, **(overrides or {})}
    levels: dict[str, int] = {}
    for name, level_name in merged.items():
        level = _level_from_name(level_name, root_level)
        # uvicorn.error carries startup/shutdown lines at INFO.
        if name != "uvicorn.error":
            level = max(level, logging.WARNING)
        levels[name] = level
    return levels


def setup_logging(
    *,
    log_level: str | None = None,
    third_party_levels: Mapping[str, str] | None = None,
) -> None:
    """
    Configure global, context-aware logging for the application.

    Environment variables:
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    - LOG_COLOR: enable ANSI colors (default: auto when TTY)
    """
    root_level = _level_from_name(log_level or os.getenv("LOG_LEVEL", "INFO"), logging.INFO)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    logging.captureWarnings(True)

    handler = logging.StreamHandler(sys.stdout)
    formatter: logging.Formatter
    if _env_flag("LOG_COLOR", sys.stdout.isatty()):
        formatter = ColorFormatter(_COLOR_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    else:
        formatter = SmartContextFormatter(_PLAIN_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    handler.setFormatter(formatter)
    handler.addFilter(ContextInjectionFilter())
    root_logger.addHandler(handler)

    # Unknown third-party loggers stay at WARNING via the root; ours follow LOG_LEVEL.
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER_PREFIX).setLevel(root_level)
    logging.getLogger("__main__").setLevel(root_level)
    for name, level in _resolve_third_party_levels(root_level, third_party_levels).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"log_level": logging.getLevelName(root_level)},
    )
