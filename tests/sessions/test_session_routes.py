from __future__ import annotations

import pytest

from src.class_log.class_log import create_app
from src.class_log.class_log.container import assemble
from src.class_log.class_log.core.exceptions import StoreUnavailableError


@pytest.fixture
def app(monkeypatch, sessions_repo, identities_repo, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble(sessions_repo=sessions_repo, identities_repo=identities_repo, clock=clock)
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


OPEN_BODY = {
    "activityId": "MATH101",
    "ownerEmail": "a@x.com",
    "subject": "Math",
    "weekday": "Mon",
    "date": "01/03/2024",
    "startTime": "08:00",
}


def test_welcome(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_json()["message"]


def test_open_and_close_roundtrip(client):
    resp = client.post("/sessions/open", json=OPEN_BODY)
    assert resp.status_code == 201
    key = resp.get_json()["session_key"]
    assert key.startswith("MATH101-")

    listed = client.get("/sessions/open", query_string={"ownerEmail": "a@x.com"})
    assert listed.status_code == 200
    assert [s["session_key"] for s in listed.get_json()] == [key]

    resp = client.put(
        "/sessions/close",
        json={"ownerEmail": "a@x.com", "activityId": "MATH101", "endTime": "09:30", "date": "01/03/2024", "status": "Concluido"},
    )
    assert resp.status_code == 200
    body = resp.get_json()["session"]
    assert body["duration"] == "1.50"
    assert body["status"] == "CLOSED"
    assert body["status_label"] == "Concluido"

    assert client.get("/sessions/open", query_string={"owner_email": "a@x.com"}).get_json() == []


def test_open_validation_error_is_400(client):
    resp = client.post("/sessions/open", json={**OPEN_BODY, "date": "2024-03-01"})
    assert resp.status_code == 400
    assert "DD/MM/YYYY" in resp.get_json()["message"]


def test_open_unknown_identity_is_404(client):
    resp = client.post("/sessions/open", json={**OPEN_BODY, "ownerEmail": "ghost@x.com"})
    assert resp.status_code == 404


def test_close_without_open_session_is_404(client):
    resp = client.put(
        "/sessions/close",
        json={"ownerEmail": "a@x.com", "activityId": "MATH101", "endTime": "09:30", "date": "01/03/2024", "status": "Concluido"},
    )
    assert resp.status_code == 404


def test_close_date_mismatch_is_400(client):
    client.post("/sessions/open", json=OPEN_BODY)
    resp = client.put(
        "/sessions/close",
        json={"ownerEmail": "a@x.com", "activityId": "MATH101", "endTime": "09:30", "date": "02/03/2024", "status": "Concluido"},
    )
    assert resp.status_code == 400


def test_list_open_requires_owner(client):
    assert client.get("/sessions/open").status_code == 400


def test_schedule_lookup(client):
    resp = client.get("/schedule", query_string={"email": "a@x.com"})
    assert resp.status_code == 200
    assert resp.get_json() == [{"name": "Math", "weekday": "Mon", "start": "08:00", "end": "09:30"}]

    assert client.get("/schedule", query_string={"email": "b@x.com"}).status_code == 404
    assert client.get("/schedule", query_string={"email": "ghost@x.com"}).status_code == 404


def test_report_download(client):
    client.post("/sessions/open", json=OPEN_BODY)
    resp = client.get("/report")

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert "relatorio_logs.xlsx" in resp.headers["Content-Disposition"]
    assert resp.data[:2] == b"PK"


class BrokenSessions:
    def find_all(self):
        raise StoreUnavailableError("down")

    def find_all_open_by_owner(self, owner_email):
        raise StoreUnavailableError("down")


def test_report_store_failure_is_500(monkeypatch, identities_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(assemble(sessions_repo=BrokenSessions(), identities_repo=identities_repo))
    resp = app.test_client().get("/report")

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Erro ao gerar relatório"


def test_store_unavailable_is_503(monkeypatch, identities_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(assemble(sessions_repo=BrokenSessions(), identities_repo=identities_repo))
    resp = app.test_client().get("/sessions/open", query_string={"email": "a@x.com"})

    assert resp.status_code == 503


def test_cors_header_for_allowed_origin(client):
    resp = client.get("/", headers={"Origin": "http://testserver"})
    assert resp.headers["Access-Control-Allow-Origin"] == "http://testserver"

    resp = client.get("/", headers={"Origin": "http://evil.example"})
    assert "Access-Control-Allow-Origin" not in resp.headers


def test_list_open_for_owner_without_account_is_empty(client):
    resp = client.get("/sessions/open", query_string={"ownerEmail": "ghost@x.com"})

    assert resp.status_code == 200
    assert resp.get_json() == []


@pytest.mark.parametrize("body", [["MATH101"], "MATH101", 42])
def test_open_with_non_object_body_is_400(client, body):
    resp = client.post("/sessions/open", json=body)

    assert resp.status_code == 400


def test_close_with_non_object_body_is_400(client):
    client.post("/sessions/open", json=OPEN_BODY)
    resp = client.put("/sessions/close", json=[{"ownerEmail": "a@x.com"}])

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Corpo da requisição deve ser um objeto JSON"
