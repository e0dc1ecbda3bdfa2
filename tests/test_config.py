from thinknote.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None, OPENAI_API_KEY="", GROQ_API_KEY="", OPENAI_BASE_URL="")

    assert settings.summary_model == "gpt-4o-mini"
    assert settings.transcription_model == "whisper-large-v3-turbo"
    assert settings.openai_base_url is None
    assert settings.rate_limit == 0


def test_cors_origins_are_split_and_stripped():
    settings = Settings(_env_file=None, CORS_ALLOW_ORIGINS=" https://a.example , ,https://b.example ")

    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example,https://b.example")

    assert Settings(_env_file=None).cors_allow_origins == ["https://a.example", "https://b.example"]


def test_secrets_are_stripped():
    settings = Settings(_env_file=None, OPENAI_API_KEY="  sk-test \n", SUMMARY_MODEL=" gpt-4o ")

    assert settings.openai_api_key == "sk-test"
    assert settings.summary_model == "gpt-4o"


def test_limits_are_clamped():
    settings = Settings(_env_file=None, RATE_LIMIT=-5, MAX_REQUEST_BYTES=10, MAX_AUDIO_BYTES=0)

    assert settings.rate_limit == 0
    assert settings.max_request_bytes == 1024
    assert settings.max_audio_bytes == 1024
