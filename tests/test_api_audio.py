from tests.conftest import make_sentences, make_words
from thinknote.application import summaries
from thinknote.services.summarizer import SummarizationError
from thinknote.services.transcriber import TranscriptionError

TRANSCRIPT = make_words(100)


def _fake_transcriber(text=TRANSCRIPT):
    calls = []

    def _transcribe(audio, filename, api_key, model):
        calls.append({"audio": audio, "filename": filename, "api_key": api_key, "model": model})
        return text

    return _transcribe, calls


async def _fake_generate(transcript, policy, api_key, model, base_url=None):
    return make_sentences(20, 5)


def _upload(client, data=b"RIFFdata", content_type="audio/wav", summarize=None):
    form = {} if summarize is None else {"summarize": summarize}
    return client.post("/audio/transcribe-summarize", files={"audio": ("lecture.wav", data, content_type)}, data=form)


def test_transcribe_only(client, monkeypatch):
    fake, calls = _fake_transcriber()
    monkeypatch.setattr(summaries, "transcribe_audio", fake)

    response = _upload(client)

    assert response.status_code == 200
    assert response.json() == {"transcript": TRANSCRIPT, "transcript_words": 100, "summary": None, "policy": None}
    assert calls[0]["filename"] == "lecture.wav"
    assert calls[0]["audio"] == b"RIFFdata"
    assert calls[0]["api_key"] == "gsk-test"


def test_transcribe_and_summarize(client, monkeypatch):
    fake, _ = _fake_transcriber()
    monkeypatch.setattr(summaries, "transcribe_audio", fake)
    monkeypatch.setattr(summaries, "generate_summary", _fake_generate)

    response = _upload(client, summarize="true")

    assert response.status_code == 200
    body = response.json()
    assert len(body["summary"].split()) == 35
    assert body["policy"]["hard_cap"] == 35


def test_summary_failure_still_returns_transcript(client, monkeypatch):
    async def _fail(*_args, **_kwargs):
        raise SummarizationError("Failed to call the summary model.")

    fake, _ = _fake_transcriber()
    monkeypatch.setattr(summaries, "transcribe_audio", fake)
    monkeypatch.setattr(summaries, "generate_summary", _fail)

    response = _upload(client, summarize="true")

    assert response.status_code == 200
    assert response.json()["transcript"] == TRANSCRIPT
    assert response.json()["summary"] is None


def test_tiny_transcript_is_not_summarized(client, monkeypatch):
    fake, _ = _fake_transcriber("Hi.")
    monkeypatch.setattr(summaries, "transcribe_audio", fake)
    monkeypatch.setattr(summaries, "generate_summary", _fake_generate)

    response = _upload(client, summarize="true")

    assert response.status_code == 200
    assert response.json()["summary"] is None


def test_transcription_failure_is_bad_gateway(client, monkeypatch):
    def _fail(*_args):
        raise TranscriptionError("Empty transcript.")

    monkeypatch.setattr(summaries, "transcribe_audio", _fail)

    response = _upload(client)

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "external_service_error"


def test_rejects_empty_upload(client):
    response = _upload(client, data=b"")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No audio file provided."


def test_rejects_non_audio_upload(client):
    response = _upload(client, content_type="application/pdf")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Unsupported audio content type."


def test_rejects_oversized_upload(settings_factory, monkeypatch):
    from fastapi.testclient import TestClient

    from thinknote.api.app import create_app

    with TestClient(create_app(settings_factory(MAX_AUDIO_BYTES=1024))) as test_client:
        response = _upload(test_client, data=b"x" * 2048)

    assert response.status_code == 413
    assert response.json()["error"]["code"] == "request_too_large"


def test_missing_audio_field_is_invalid(client):
    response = client.post("/audio/transcribe-summarize", data={"summarize": "true"})

    assert response.status_code == 400
