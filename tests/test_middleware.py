import logging

from fastapi.testclient import TestClient

from thinknote.api.app import create_app


def test_rate_limit_rejects_excess_requests(settings_factory):
    with TestClient(create_app(settings_factory(RATE_LIMIT=2))) as test_client:
        statuses = [test_client.get("/meta/health").status_code for _ in range(3)]
        blocked = test_client.get("/meta/health")

    assert statuses == [200, 200, 429]
    assert blocked.json() == {"error": {"code": "rate_limit_exceeded", "message": "Too many requests."}}
    assert "X-Request-Id" in blocked.headers


def test_oversized_body_is_rejected(settings_factory):
    with TestClient(create_app(settings_factory(MAX_REQUEST_BYTES=1024))) as test_client:
        response = test_client.post("/summarize", json={"transcript": "word " * 1000})

    assert response.status_code == 413
    assert response.json()["error"]["code"] == "request_too_large"


def test_generated_request_id(client):
    response = client.get("/meta/health")

    assert len(response.headers["X-Request-Id"]) == 32


def test_request_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="thinknote"):
        client.get("/meta/health", headers={"X-Request-Id": "req-1"})

    records = [record for record in caplog.records if record.name == "thinknote.core.middleware"]
    assert records
    assert "GET /meta/health 200" in records[-1].getMessage()
