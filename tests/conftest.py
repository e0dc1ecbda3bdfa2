from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from thinknote.api.app import create_app
from thinknote.core.config import Settings


def make_words(count: int, word: str = "word") -> str:
    return " ".join([word] * count)


def make_sentences(count: int, words_per_sentence: int) -> str:
    sentence = " ".join(["word"] * (words_per_sentence - 1) + ["end."])
    return " ".join([sentence] * count)


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    def _make(**overrides: object) -> Settings:
        values: dict[str, object] = {
            "OPENAI_API_KEY": "sk-test",
            "GROQ_API_KEY": "gsk-test",
            "RATE_LIMIT": 0,
            "CORS_ALLOW_ORIGINS": "",
            "APP_ENV": "local",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client
